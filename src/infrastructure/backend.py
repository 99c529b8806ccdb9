"""Process-wide handles to the hosted database and object storage."""

from collections.abc import Callable

import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from core.config import Settings
from core.exceptions import ConfigurationError
from infrastructure.database.session import create_engine, create_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.storage.supabase_storage import SupabaseStorage

logger = structlog.get_logger()


class Backend:
    """Database session factory and storage client for one process.

    Built once by the application lifespan (``Backend.from_settings``),
    stored on ``app.state`` and handed to services through FastAPI
    dependencies. Nothing mutates it after construction; ``close`` releases
    its connections at shutdown.

    A missing credential leaves the matching handle as ``None``; requests that
    need it fail with ``ConfigurationError`` instead of the process refusing
    to start.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        storage: SupabaseStorage | None = None,
        engine: AsyncEngine | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._storage = storage
        self._engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "Backend":
        engine = None
        session_factory = None
        if settings.database_url:
            engine = create_engine(settings.async_database_url, echo=settings.debug)
            session_factory = create_session_factory(engine)
        else:
            logger.warning("database_not_configured")

        storage = None
        if settings.storage_configured:
            storage = SupabaseStorage(
                settings.supabase_url,
                settings.supabase_service_role_key,
                timeout=settings.storage_timeout_seconds,
            )
        else:
            logger.warning("storage_not_configured")

        return cls(session_factory=session_factory, storage=storage, engine=engine)

    @property
    def database_configured(self) -> bool:
        return self._session_factory is not None

    @property
    def storage_configured(self) -> bool:
        return self._storage is not None

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise ConfigurationError("Server missing DATABASE_URL. Add it to .env")
        return self._session_factory

    @property
    def storage(self) -> SupabaseStorage:
        if self._storage is None:
            raise ConfigurationError(
                "Server missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY. Add them to .env"
            )
        return self._storage

    def uow_factory(self) -> Callable[[], SQLAlchemyUnitOfWork]:
        """Factory for creating Unit of Work instances."""
        session_factory = self.session_factory

        def factory() -> SQLAlchemyUnitOfWork:
            return SQLAlchemyUnitOfWork(session_factory)

        return factory

    async def close(self) -> None:
        if self._storage is not None:
            await self._storage.close()
        if self._engine is not None:
            await self._engine.dispose()
