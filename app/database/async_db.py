import logging
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, QueuePool, StaticPool

from app.config.settings import get_settings

logger = logging.getLogger(__name__)

_async_engine: AsyncEngine | None = None
_session_maker: async_sessionmaker[AsyncSession] | None = None


def _is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def create_async_database_engine(database_url: str | None = None) -> AsyncEngine:
    """Crea el engine de base de datos asíncrono"""
    settings = get_settings()
    database_url = database_url or settings.database_url

    try:
        # Configuración base común
        base_config = {
            "echo": settings.DB_ECHO,
            "future": True,
        }

        if _is_sqlite(database_url):
            # SQLite en memoria: una sola conexión compartida para no perder el esquema
            logger.info("Creating async database engine for SQLite (StaticPool)")
            engine_config = {
                **base_config,
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }
        elif settings.DEBUG:
            # Para desarrollo: usar NullPool (sin pooling)
            logger.info("Creating async database engine for DEVELOPMENT (NullPool)")
            engine_config = {
                **base_config,
                "poolclass": NullPool,
                "pool_pre_ping": True,
            }
        else:
            # Para producción: usar pool completo
            logger.info("Creating async database engine for PRODUCTION (QueuePool)")
            engine_config = {
                **base_config,
                "poolclass": QueuePool,
                "pool_pre_ping": True,
                "pool_size": settings.DB_POOL_SIZE,
                "max_overflow": settings.DB_MAX_OVERFLOW,
                "pool_recycle": settings.DB_POOL_RECYCLE,
                "pool_timeout": settings.DB_POOL_TIMEOUT,
            }

        return create_async_engine(database_url, **engine_config)

    except Exception as e:
        logger.error(f"Failed to create async database engine: {e}")
        raise


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session maker asíncrono ligado al engine"""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


def get_async_engine() -> AsyncEngine:
    """Retorna el engine global, creándolo en el primer uso"""
    global _async_engine
    if _async_engine is None:
        _async_engine = create_async_database_engine()
    return _async_engine


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    global _session_maker
    if _session_maker is None:
        _session_maker = create_session_maker(get_async_engine())
    return _session_maker


async def dispose_engine() -> None:
    """Cierra las conexiones del engine global"""
    global _async_engine, _session_maker
    if _async_engine is not None:
        await _async_engine.dispose()
        logger.info("Async database engine disposed")
    _async_engine = None
    _session_maker = None


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency para obtener la sesión de base de datos asíncrona
    """
    async with get_session_maker()() as session:
        try:
            yield session
        except SQLAlchemyError as e:
            logger.error(f"Async database error: {e}")
            await session.rollback()
            raise
        except Exception:
            # Domain errors raised by the endpoint, nothing to log here
            await session.rollback()
            raise


async def check_db_connection() -> bool:
    """Verifica la conexión a la base de datos"""
    try:
        async with get_async_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
