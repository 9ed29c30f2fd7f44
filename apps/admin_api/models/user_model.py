from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from apps.admin_api.core.db import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=True)

    # Nullable until the user is attached to a company
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=True)

    # --- Timestamps ---
    created_at = Column(DateTime, server_default=func.now(), index=True)
    updated_at = Column(DateTime, onupdate=func.now())

    # Relationships
    company = relationship("Company", back_populates="users")
    quotes = relationship(
        "Quote",
        back_populates="user",
        order_by="[Quote.created_at.desc(), Quote.id.desc()]",
    )
    jobs = relationship(
        "Job",
        back_populates="user",
        order_by="[Job.created_at.desc(), Job.id.desc()]",
    )

    def __repr__(self):
        return f"<User id={self.id} email={self.email!r}>"
