import uvicorn

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger("run")

if __name__ == "__main__":
    logger.info("Server running on http://localhost:%s", settings.PORT)
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
