import logging

from fastapi import APIRouter, Depends, Query, Request

from config.settings import Settings, get_settings
from models.greeting import Greeting
from services.greeting import DEFAULT_NAME, build_greeting
from utils.hateoas import hateoas_greeting
from utils.query import require_well_formed_query


logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Greetings"],
    dependencies=[Depends(require_well_formed_query)],
)


# -----------------------------------------------------------------------------
# GET Endpoint
# -----------------------------------------------------------------------------

@router.get("/greeting", response_model=Greeting, status_code=200, name="greeting")
async def greeting(
    request: Request,
    name: str = Query(DEFAULT_NAME, description="Name to greet"),
    settings: Settings = Depends(get_settings),
):
    """Greet `name` and link back to this exact representation."""
    logger.debug("Greeting requested for name=%r", name)

    result = build_greeting(name)
    return hateoas_greeting(request, result, name, base_url=settings.PUBLIC_BASE_URL)
