from logging.config import fileConfig

from sqlalchemy import create_engine, pool

from alembic import context

# Load models
from apps.admin_api.core.db import DATABASE_URL, Base, build_engine, import_models

import_models()

# Alembic Config object
config = context.config

# Interpret alembic.ini for logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline():
    context.configure(
        url=DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    # Callers (tests, scripts) may hand over an open connection
    connection = config.attributes.get("connection")
    if connection is not None:
        _run_with_connection(connection)
        return

    if DATABASE_URL.startswith("sqlite"):
        engine = build_engine(DATABASE_URL)
    else:
        engine = create_engine(DATABASE_URL, poolclass=pool.NullPool)

    with engine.connect() as connection:
        _run_with_connection(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
