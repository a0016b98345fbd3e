# app/core/startup.py
import logging

from fastapi import FastAPI

from app.core.config import settings
from app.data.database import Base, engine
from app.models.database_models.fortune_draw import FortuneDraw
from app.models.database_models.fortune_session import FortuneSession
from app.models.database_models.fortune_template import FortuneTemplate

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def startup_event(app: FastAPI):
    """
    Initialize resources on application startup.
    """
    configure_logging()

    try:
        if settings.CREATE_TABLES_ON_STARTUP:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info(
                "Created tables: %s",
                ", ".join(model.__tablename__ for model in (FortuneTemplate, FortuneSession, FortuneDraw)),
            )
    except Exception as e:
        logger.error("Failed to startup: %s", e)
        raise
