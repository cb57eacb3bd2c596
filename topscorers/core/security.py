import secrets
from typing import Optional
from fastapi import Header, HTTPException, Request
from ..config import app_config
from ..logger import get_logger

logger = get_logger()

API_KEY_HEADER = 'x-api-key'

async def require_api_key(request: Request, x_api_key: Optional[str] = Header(None, alias=API_KEY_HEADER)):
    """Reject the request unless it carries the configured API key"""
    ip_address = request.client.host if request.client else 'Unknown'
    path = request.url.path
    expected_key = app_config.api_key

    if not expected_key:
        logger.warning(f"API Key not configured. IP: {ip_address}, Path: {path}")
        raise HTTPException(status_code=401, detail="Unauthorized")

    if x_api_key is None:
        logger.warning(f"API Key missing from request. IP: {ip_address}, Path: {path}")
        raise HTTPException(status_code=401, detail="Unauthorized")

    if not secrets.compare_digest(x_api_key.encode('utf-8'), expected_key.encode('utf-8')):
        logger.warning(f"Invalid API Key provided. IP: {ip_address}, Path: {path}")
        raise HTTPException(status_code=401, detail="Unauthorized")
