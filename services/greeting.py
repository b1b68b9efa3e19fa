from __future__ import annotations

import logging

from models.greeting import Greeting

logger = logging.getLogger(__name__)

DEFAULT_NAME = "World"
GREETING_TEMPLATE = "Hello, %s!"


# -----------------------------------------------------------------------------
# Representation
# -----------------------------------------------------------------------------
def build_greeting(name: str) -> Greeting:
    """
    Render the greeting for `name`.
    Links are attached separately once the request URL is known.
    """
    logger.debug("Building greeting for %r", name)
    return Greeting(content=GREETING_TEMPLATE % (name,))
