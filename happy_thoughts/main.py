# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Any, Dict, List
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

# Local application imports
from .api.v1 import auth_router, thought_router, user_router, register_exception_handlers
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.container import get_container
from .infrastructure.db.mongo_connection import MongoConnection
from .infrastructure.db.seed import reset_thoughts

logger = logging.getLogger(__name__)

SERVICE_NAME = "Happy Thoughts API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Ensures the unique username index, optionally reseeds the thoughts
    collection, and closes the MongoDB client on shutdown.
    """
    settings = get_settings()
    connection: MongoConnection = get_container().get(MongoConnection)
    
    try:
        await connection.ensure_indexes()
    except Exception as e:
        # Don't fail app startup if MongoDB is briefly unavailable
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)
    
    if settings.reset_db:
        try:
            await reset_thoughts(connection.get_thought_collection(), settings.seed_file)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to seed thoughts from {settings.seed_file}: {e}", exc_info=True)
    
    yield
    
    connection.close()
    logger.info("Application shutdown complete")


def list_endpoints(application: FastAPI) -> List[Dict[str, Any]]:
    """Method/path pairs of every API route, in registration order"""
    endpoints = []
    for route in application.routes:
        if isinstance(route, APIRoute):
            endpoints.append({
                "path": route.path,
                "methods": sorted(route.methods),
            })
    return endpoints


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration
    - API route and error handler registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    setup_logging(settings.log_level)
    
    application = FastAPI(
        title=SERVICE_NAME,
        version="1.0.0",
        description="Post, like and browse short happy thoughts",
        lifespan=lifespan,
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(application)
    
    @application.get("/", tags=["meta"])
    async def index() -> Dict[str, Any]:
        return {"name": SERVICE_NAME, "endpoints": list_endpoints(application)}
    
    # Register API routers
    application.include_router(thought_router, prefix="/thoughts")
    application.include_router(user_router)
    application.include_router(auth_router)
    
    return application


# Create application instance
app = create_application()
