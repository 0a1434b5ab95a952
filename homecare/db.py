from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from .config import get_settings

load_dotenv()

settings = get_settings()


def _engine_kwargs(url: str, timeout: int) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    kwargs = {"pool_pre_ping": True, "pool_recycle": 3600}
    if url.startswith("mysql+pymysql"):
        # worker threads abandoned by a lookup timeout still end when the driver gives up
        kwargs["connect_args"] = {"connect_timeout": timeout, "read_timeout": timeout, "write_timeout": timeout}
    return kwargs


engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url, settings.db_timeout))


SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


class Base(DeclarativeBase):
    pass
