from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from tcg_backend.load_secrets import database_url


def create_engine_from_url(url: str):
    """Create the async engine. Connection pool options only apply to server databases."""
    if url.startswith("sqlite"):
        return create_async_engine(url=url, echo=False)
    return create_async_engine(url, pool_size=20, max_overflow=20)


engine = create_engine_from_url(database_url)

# Centralized session factory to avoid creating it in router modules.
Session = async_sessionmaker(
    autocommit=False,
    class_=AsyncSession,
    autoflush=True,
    expire_on_commit=False,
    bind=engine,
)


def get_session_factory() -> async_sessionmaker:
    return Session
