import time
from fastapi import APIRouter
from ..config import app_config
from ..models.response import HealthResponse
from ..database import DatabaseManager
from ..logger import get_logger

logger = get_logger()
router = APIRouter()

started_at = time.monotonic()

@router.get("/health", response_model=HealthResponse)
@router.head("/health")
async def health_check():
    """Report uptime and whether the score store has been built"""
    db = await DatabaseManager.get_instance()
    response = HealthResponse(
        uptime=time.monotonic() - started_at,
        store=app_config.store,
        store_ready=db.initialized and db.store is not None
    )
    if not response.store_ready:
        logger.debug("Health check while the score store is not initialized")
    return response
