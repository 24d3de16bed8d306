from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from .config import settings


def build_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    url = database_url or settings.database_url
    echo = settings.debug if echo is None else echo
    # SQLite necesita check_same_thread desactivado para compartir conexiones
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(url, echo=echo)


engine = build_engine()


def init_db(target: Optional[Engine] = None) -> None:
    # Importar modelos para asegurar que todas las tablas estén registradas en el metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(target or engine)


def reset_db(target: Optional[Engine] = None) -> None:
    """Drop and recreate every demo table."""
    from . import models  # noqa: F401

    bind = target or engine
    SQLModel.metadata.drop_all(bind)
    SQLModel.metadata.create_all(bind)

