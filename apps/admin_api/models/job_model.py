from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from apps.admin_api.core.db import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String, nullable=False)
    status = Column(String, nullable=False, default="scheduled")  # scheduled / in_progress / done
    scheduled_for = Column(DateTime, nullable=True)

    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="jobs")
