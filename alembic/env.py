import asyncio
from logging.config import fileConfig
from alembic import context

from core.config import settings
from core.database import Database
from models import Base

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _configure(**kwargs):
    # SQLite cannot ALTER most constraints in place; batch mode rebuilds tables
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=True,
        **kwargs
    )


def run_migrations_offline():
    """Emit SQL for the configured database without connecting"""
    _configure(url=settings.database_url, literal_binds=True)

    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection):
    _configure(connection=connection)

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online():
    """Migrate through the same aiosqlite engine the service uses"""
    database = Database(settings.database_url)
    database.ensure_directory()

    try:
        async with database.engine.connect() as connection:
            await connection.run_sync(_run_with_connection)
    finally:
        await database.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
