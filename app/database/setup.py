"""
Database Setup - Creación y eliminación del esquema.

Las migraciones versionadas viven en alembic/; estas funciones sirven para
entornos locales y tests.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from app.database.async_db import get_async_engine
from app.models.db.base import Base

# Registra las tablas en Base.metadata
from app.domains.credit.infrastructure.persistence.sqlalchemy import models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Crea todas las tablas en la base de datos."""
    engine = engine or get_async_engine()
    try:
        async with engine.begin() as conn:
            logger.info("Creando tablas...")
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Tablas creadas exitosamente")
    except Exception as e:
        logger.error(f"Error creando tablas: {e}")
        raise


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """Elimina todas las tablas de la base de datos."""
    engine = engine or get_async_engine()
    try:
        async with engine.begin() as conn:
            logger.info("Eliminando tablas...")
            await conn.run_sync(Base.metadata.drop_all)
            logger.info("Tablas eliminadas exitosamente")
    except Exception as e:
        logger.error(f"Error eliminando tablas: {e}")
        raise
