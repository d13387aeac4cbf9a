# filmorate/database/alembic/env.py
from __future__ import annotations

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool, text
from sqlalchemy.engine import Connection

# --- Load app settings --------------------------------------------------------
# This import must work without importing the whole app graph (keep it light).
from filmorate.common.settings import get_settings

cfg = get_settings()

# --- Alembic Config -----------------------------------------------------------
alembic_config = context.config

# If alembic.ini has a loggers section, set it up.
if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name)

# Settings already honours a DATABASE_URL environment override.
database_url = cfg.database_url

# Models register themselves on Base.metadata when the package is imported.
import filmorate.database.models  # noqa: E402,F401
from filmorate.database.core.main import Base  # noqa: E402

target_metadata = Base.metadata

is_sqlite = database_url.startswith("sqlite")
app_schema = cfg.db_schema if cfg.db_schema and cfg.db_schema.lower() != "public" else None
version_table_schema = None if is_sqlite else getattr(cfg, "alembic_version_table_schema", "public")


def include_object(object, name, type_, reflected, compare_to):
    """Limit autogenerate to our schema (but still allow version table in public)."""
    obj_schema = getattr(object, "schema", None)
    if type_ == "table":
        if obj_schema is None:
            # tables created without explicit schema are treated as in search_path
            return True
        return obj_schema in {app_schema, version_table_schema}
    return True


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode (no DB connection)."""
    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        include_schemas=not is_sqlite,
        include_object=include_object,
        version_table_schema=version_table_schema,
        render_as_batch=is_sqlite,
    )

    with context.begin_transaction():
        context.run_migrations()


def _prepare_connection(conn: Connection) -> None:
    """Create the application schema when one is configured (PostgreSQL only)."""
    if is_sqlite or not app_schema:
        return
    conn.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{app_schema}"'))
    conn.execute(text(f'SET search_path TO "{app_schema}", public'))


def run_migrations_online() -> None:
    """Run migrations in 'online' mode (with an Engine/Connection)."""
    connectable = create_engine(
        database_url,
        poolclass=pool.NullPool,
        future=True,
    )

    with connectable.connect() as connection:
        _prepare_connection(connection)

        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            include_schemas=not is_sqlite,
            include_object=include_object,
            version_table_schema=version_table_schema,
            compare_type=True,
            compare_server_default=True,
            render_as_batch=is_sqlite,  # SQLite needs batch mode for ALTERs
        )

        with context.begin_transaction():
            context.run_migrations()


# Entrypoint selected by Alembic
if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
