"""
Health API endpoints
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.config import config
from app.core.logger import logger
from app.db.mongodb import db

router = APIRouter()


@router.get("/health")
async def health_check():
    """Liveness plus a MongoDB ping; 503 when the database is unreachable"""
    body = {
        "status": "healthy",
        "service": config.service_name,
        "version": config.service_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected",
    }

    try:
        if db.client is None:
            raise RuntimeError("MongoDB client not initialised")
        await db.client.admin.command("ping")
    except Exception as e:
        logger.warning("Health check: MongoDB unreachable", metadata={"event": "health_check_failed", "error": str(e)})
        body.update({"status": "unhealthy", "database": "disconnected"})
        return JSONResponse(status_code=503, content=body)

    return body
