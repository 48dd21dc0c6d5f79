from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, Numeric, String

from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Quotation(Base):
    __tablename__ = "quotations"

    id = Column(String(36), primary_key=True, index=True)
    pet_name = Column(String, nullable=False)
    species = Column(String, nullable=False)
    breed = Column(String, nullable=True)
    age = Column(Integer, nullable=False)
    premium_plan = Column(Boolean, nullable=False)
    price = Column(Numeric(12, 4), nullable=False)
    expires_at = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
