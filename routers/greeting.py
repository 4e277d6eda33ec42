import logging

from fastapi import APIRouter, Query, Request

from config.settings import settings
from models.greeting import Greeting
from utils.hateoas import (
    GREETING_ROUTE,
    GREETING_ROUTE_NAME,
    HALJSONResponse,
    hateoas_greeting,
)

logger = logging.getLogger(__name__)

TEMPLATE = "Hello, {}!"


router = APIRouter(
    tags=["Greeting"],
)


# -----------------------------------------------------------------------------
# GET Endpoint
# -----------------------------------------------------------------------------

@router.get(
    GREETING_ROUTE,
    response_model=Greeting,
    response_class=HALJSONResponse,
    status_code=200,
    name=GREETING_ROUTE_NAME,
)
def greeting(
    request: Request,
    name: str = Query(settings.DEFAULT_NAME, description="Name to greet"),
):
    """Greet `name` and link back to this exact greeting."""
    logger.debug("greeting requested for name=%r", name)

    greeting = Greeting(content=TEMPLATE.format(name))
    return hateoas_greeting(request, greeting, name)
