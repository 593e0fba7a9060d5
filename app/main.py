from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.home.routes import router as home_router
from app.greeting.routes import router as greeting_router
from app.health.routes import router as health_router
from config import settings
import logging

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        description="FastAPI service returning a static greeting",
        **settings.get_app_config(),
    )

    # Add CORS middleware to allow requests from the frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(home_router)
    app.include_router(greeting_router)
    app.include_router(health_router)

    logger.info(f"Application created for environment: {settings.APP_ENV}")
    return app


app = create_app()
