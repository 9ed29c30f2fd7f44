from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from apps.admin_api.schemas.company_schema import CompanyOut
from apps.admin_api.schemas.job_schema import JobOut
from apps.admin_api.schemas.quote_schema import QuoteOut


# ============================================================
# Base shared fields
# ============================================================
class UserBase(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None
    company: Optional[CompanyOut] = None


# ============================================================
# "index" view: one row per user
# ============================================================
class UserListItem(UserBase):
    quotes_count: int = 0
    jobs_count: int = 0


# ============================================================
# "show" view: full record with related entities
# ============================================================
class UserDetail(UserBase):
    updated_at: Optional[datetime] = None
    quotes: List[QuoteOut] = []
    jobs: List[JobOut] = []

    class Config:
        from_attributes = True
