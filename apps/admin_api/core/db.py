import logging
import os

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from apps.admin_api.core.config import settings

logger = logging.getLogger(__name__)

# ----------------------------------------------------
# 1. DATABASE URL
# ----------------------------------------------------
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(__file__))))
DB_PATH = os.path.join(BASE_DIR, "admin_data", "admin.db")

if settings.DATABASE_URL:
    DATABASE_URL = settings.DATABASE_URL
else:
    os.makedirs(os.path.dirname(DB_PATH), exist_ok=True)
    DATABASE_URL = f"sqlite:///{DB_PATH}"


# ----------------------------------------------------
# 2. CREATE ENGINE
# ----------------------------------------------------
def build_engine(url: str):
    """
    SQLite needs check_same_thread off for FastAPI's threadpool, and an
    in-memory database must share a single connection to be visible
    across sessions.
    """
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = build_engine(DATABASE_URL)

# ----------------------------------------------------
# 3. SESSION FACTORY
# ----------------------------------------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ----------------------------------------------------
# 4. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


def import_models():
    """
    Register every mapped class on Base.metadata.

    Relationships are declared by class name, so all models must be
    imported before the first query configures the mappers.
    """
    from apps.admin_api.models.company_model import Company
    from apps.admin_api.models.job_model import Job
    from apps.admin_api.models.quote_model import Quote
    from apps.admin_api.models.user_model import User

    return [Company, User, Quote, Job]


# ----------------------------------------------------
# 5. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db():
    """
    FastAPI dependency: yields a DB session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_connection(bind=None) -> bool:
    try:
        with (bind or engine).connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database connectivity check failed")
        return False
    return True


# ----------------------------------------------------
# 6. AUTO-MIGRATION LOGIC
# ----------------------------------------------------
def table_exists(table_name: str, bind=None) -> bool:
    inspector = inspect(bind or engine)
    return table_name in inspector.get_table_names()


def run_migrations(bind=None):
    """
    Performs minimal migrations:
    - If a table doesn't exist → create it.
    - If columns are missing → ADD COLUMN.

    This avoids a full schema rebuild (not safe for SQLite).
    """
    bind = bind or engine
    models = import_models()

    missing = [m.__tablename__ for m in models if not table_exists(m.__tablename__, bind)]
    if missing:
        logger.info("[DB] Creating tables: %s", ", ".join(missing))
        Base.metadata.create_all(bind=bind)

    inspector = inspect(bind)
    for model in models:
        if model.__tablename__ in missing:
            continue

        existing_cols = {col["name"] for col in inspector.get_columns(model.__tablename__)}
        for col_name, col_obj in model.__table__.columns.items():
            if col_name in existing_cols:
                continue
            col_type = col_obj.type.compile(bind.dialect)
            alter = f"ALTER TABLE {model.__tablename__} ADD COLUMN {col_name} {col_type}"
            logger.info("[DB][MIGRATION] %s", alter)
            with bind.begin() as conn:
                conn.execute(text(alter))

    logger.info("[DB] Migration complete.")
