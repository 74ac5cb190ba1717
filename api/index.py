import logging

import uvicorn

from app.core.config import get_settings
from app.main import app

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

logger.info("api/index.py initialized")

# Entry point for ASGI servers: exports the FastAPI app instance


if __name__ == "__main__":
    logger.info("Favorite Movies is running at %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
