from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class JobOut(BaseModel):
    id: int
    title: str
    status: str
    scheduled_for: Optional[datetime] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
