from app.db.models.quotation import Quotation
from app.db.models.policy import Policy

__all__ = ["Quotation", "Policy"]
