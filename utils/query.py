import logging
import re
from urllib.parse import unquote_to_bytes

from fastapi import HTTPException, Request


logger = logging.getLogger(__name__)

_BAD_ESCAPE = re.compile(rb"%(?![0-9A-Fa-f]{2})")


def is_well_formed_query(raw: bytes) -> bool:
    """
    Check that a raw query string percent-decodes cleanly to UTF-8.

    Starlette decodes query strings leniently (bad escapes are kept verbatim
    and invalid UTF-8 is replaced), so the raw bytes are checked here.
    """
    if _BAD_ESCAPE.search(raw):
        return False
    for pair in raw.split(b"&"):
        for part in pair.split(b"=", 1):
            try:
                unquote_to_bytes(part.replace(b"+", b" ")).decode("utf-8")
            except UnicodeDecodeError:
                return False
    return True


# -----------------------------------------------------------------------------
# Dependency
# -----------------------------------------------------------------------------
async def require_well_formed_query(request: Request) -> None:
    """Reject requests whose query string cannot be decoded."""
    raw: bytes = request.scope.get("query_string", b"")
    if not is_well_formed_query(raw):
        logger.warning("Rejected malformed query string: %r", raw)
        raise HTTPException(status_code=400, detail="Malformed query string encoding")
