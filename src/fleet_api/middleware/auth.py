import logging
from typing import cast

from fastapi import Request
from src.fleet_api.config import get_settings
from src.fleet_api.middleware.exceptions import InvalidAPIKeyError, MissingAPIKeyError

logger = logging.getLogger(__name__)


async def validate_api_key(request: Request) -> str:
    """Validate the API key header of an incoming request."""
    settings = get_settings()
    api_key = request.headers.get(settings.FASTAPI_API_KEY_HEADER)
    if not api_key:
        logger.warning("Missing API key in request")
        raise MissingAPIKeyError
    if api_key != settings.FASTAPI_API_KEY:
        logger.warning("Invalid API key: %s", api_key)
        raise InvalidAPIKeyError(api_key)
    logger.debug("API key validated successfully")
    return cast(str, api_key)
