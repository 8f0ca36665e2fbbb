from sqlalchemy.engine import Engine

from app.db.base import Base
from app.db import models  # noqa: F401  registers tables on Base.metadata


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)
