from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from ..config import settings

def engine_options(url: str) -> dict:
    """Параметры create_engine в зависимости от СУБД."""
    if url.startswith("sqlite"):
        # соединения уходят в threadpool FastAPI; у sqlite в памяти
        # SingletonThreadPool, размеры пула ему не передаются
        return {"connect_args": {"check_same_thread": False}}
    options = {"pool_size": 10, "max_overflow": 20}
    if url.startswith("postgresql"):
        options["connect_args"] = {"client_encoding": "utf8"}
    return options

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    pool_recycle=3600,
    echo=False,
    **engine_options(settings.DATABASE_URL)
)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
def get_db():
    db = SessionLocal()
    try: yield db
    finally: db.close()
