import logging

from sqlalchemy import Engine

from petrecords.db.base import Base

# IMPORTANT: import models so they register with Base.metadata
import petrecords.db.models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Ensured tables: %s", ", ".join(sorted(Base.metadata.tables)))
