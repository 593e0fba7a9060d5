from fastapi import APIRouter
from .schemas import HealthResponse
from config import settings

router = APIRouter(tags=["Health"])

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint
    """
    return HealthResponse(message="Server is running!", version=settings.APP_VERSION)
