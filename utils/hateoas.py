from fastapi import Request
from typing import List, Optional
from urllib.parse import quote

from models.hateoas import HATEOASLink
from models.greeting import Greeting


GREETING_PATH = "/greeting"


# -----------------------------------------------------------------------------
# Greeting HATEOAS
# -----------------------------------------------------------------------------
def greeting_href(request: Request, name: str, base_url: Optional[str] = None) -> str:
    """
    Canonical URL of the greeting for `name`.

    The query is rebuilt from the resolved name, so a defaulted name still
    appears explicitly. `name` is percent-encoded as UTF-8 with no safe
    characters, which keeps `&`, `=` and `/` inside the parameter value.
    """
    if base_url:
        resource = base_url.rstrip("/") + GREETING_PATH
    else:
        resource = str(request.url_for("greeting"))
    # Spaces encode as %20, not the form-style "+" of include_query_params.
    return f"{resource}?name={quote(name, safe='')}"


def build_self_link(request: Request, name: str, base_url: Optional[str] = None) -> HATEOASLink:
    return HATEOASLink(
        rel="self",
        href=greeting_href(request, name, base_url),
    )


def build_greeting_links(request: Request, name: str, base_url: Optional[str] = None) -> List[HATEOASLink]:
    return [
        build_self_link(request, name, base_url),
    ]


def hateoas_greeting(request: Request, greeting: Greeting, name: str, base_url: Optional[str] = None) -> Greeting:
    links: List[HATEOASLink] = build_greeting_links(request, name, base_url)

    if links:
        greeting = greeting.model_copy(update={"links": links})

    return greeting
