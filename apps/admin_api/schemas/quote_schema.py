from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class QuoteOut(BaseModel):
    id: int
    title: str
    status: str
    total: Optional[Decimal] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
