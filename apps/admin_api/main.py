from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.admin_api.core.config import settings
from apps.admin_api.core.db import run_migrations
from apps.admin_api.core.errors import register_exception_handlers
from apps.admin_api.core.log import configure_logging

# Routers
from apps.admin_api.routes import admin_users, system

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Admin Users API",
    version="1.0.0",
)

# ==========================
# CORS
# ==========================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# ==========================
# Startup Event
# ==========================
@app.on_event("startup")
def startup_event():
    if settings.AUTO_MIGRATE:
        run_migrations()
        logger.info("Database initialized")
    logger.info("Admin Users API is running")

# ==========================
# Routers
# ==========================
app.include_router(system.router, prefix="/system", tags=["system"])
app.include_router(admin_users.router, prefix="/admin/users", tags=["admin"])

# ==========================
# Root Endpoint
# ==========================
@app.get("/")
def root():
    return {
        "service": "admin-users-api",
        "status": "running",
        "endpoints": {
            "system": "/system/health",
            "users": "/admin/users",
            "user": "/admin/users/{user_id}",
        },
    }
