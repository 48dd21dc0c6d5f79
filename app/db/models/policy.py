from sqlalchemy import Boolean, Column, Date, String

from app.db.base import Base


class Policy(Base):
    __tablename__ = "policies"

    id = Column(String(36), primary_key=True, index=True)
    # Opaque reference into the quoting service; no foreign key across services
    quotation_id = Column(String, nullable=False, index=True)
    owner_id = Column(String, nullable=False)
    owner_name = Column(String, nullable=False)
    owner_email = Column(String, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    active = Column(Boolean, nullable=False, default=True)
