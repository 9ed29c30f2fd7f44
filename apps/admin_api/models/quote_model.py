from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from apps.admin_api.core.db import Base


class Quote(Base):
    __tablename__ = "quotes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String, nullable=False)
    status = Column(String, nullable=False, default="draft")  # draft / sent / accepted / rejected
    total = Column(Numeric(12, 2), nullable=True)

    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="quotes")
