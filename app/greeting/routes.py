from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
import logging

from .services import GreetingService, get_greeting_service

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Greeting"],
    prefix="",
)

@router.api_route("/greeting", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def greeting(service: GreetingService = Depends(get_greeting_service)):
    """
    Return the configured greeting as plain text
    """
    try:
        logger.info("Serving greeting")
        return service.greet()
    except Exception as e:
        logger.error(f"Error building greeting: {str(e)}")
        raise HTTPException(
            status_code=500,
            detail="Internal server error"
        )
