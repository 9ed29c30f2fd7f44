from fastapi import APIRouter

from apps.admin_api.core.db import check_connection

router = APIRouter()


@router.get("/health")
def health():
    return {
        "status": "ok",
        "database": "ok" if check_connection() else "unavailable",
    }
