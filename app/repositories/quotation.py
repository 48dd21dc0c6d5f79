import logging

from sqlalchemy.orm import Session

from app.db.models.quotation import Quotation as QuotationModel
from app.domain.quotation import Quotation
from app.errors import DomainValidationError

logger = logging.getLogger(__name__)


def _to_domain(row: QuotationModel) -> Quotation:
    return Quotation.reconstruct(
        id=row.id,
        pet_name=row.pet_name,
        species=row.species,
        breed=row.breed,
        age=row.age,
        premium_plan=row.premium_plan,
        price=row.price,
        expires_at=row.expires_at,
    )


def save_quotation(db: Session, quotation: Quotation) -> Quotation:
    """Persist a quotation. Pure data access - no business logic."""
    db_quotation = QuotationModel(
        id=quotation.id,
        pet_name=quotation.pet_name,
        species=quotation.species,
        breed=quotation.breed,
        age=quotation.age,
        premium_plan=quotation.premium_plan,
        price=quotation.price,
        expires_at=quotation.expires_at,
    )
    db.add(db_quotation)
    db.commit()
    db.refresh(db_quotation)
    return _to_domain(db_quotation)


def get_quotation_by_id(db: Session, quotation_id: str) -> Quotation | None:
    """Get a quotation by ID.

    A stored row that no longer satisfies the quotation invariants is logged
    and the validation error re-raised.
    """
    row = db.query(QuotationModel).filter(QuotationModel.id == quotation_id).first()
    if row is None:
        return None
    try:
        return _to_domain(row)
    except DomainValidationError as e:
        logger.error("Invalid quotation record with id: %s - %s", quotation_id, e)
        raise


def get_all_quotations(db: Session) -> list[Quotation]:
    """Get all quotations in insertion order, skipping invalid records."""
    rows = db.query(QuotationModel).order_by(QuotationModel.created_at).all()
    quotations = []
    for row in rows:
        try:
            quotations.append(_to_domain(row))
        except DomainValidationError as e:
            logger.warning("Skipping invalid quotation record with id: %s - %s", row.id, e)
    return quotations
