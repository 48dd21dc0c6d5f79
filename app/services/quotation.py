import logging

from sqlalchemy.orm import Session

import app.repositories.quotation as quotation_repo
from app.domain.pricing import calculate_price
from app.domain.quotation import Quotation

logger = logging.getLogger(__name__)


def generate_quotation(
    db: Session,
    pet_name: str | None,
    species: str | None,
    breed: str | None,
    age: int,
    premium_plan: bool,
) -> Quotation:
    """
    Price and store a new quotation.

    - Computes the price with the pricing rules
    - Validates the quotation (age, pet name, species, price) before anything is stored
    - Sets the expiry 30 days from today

    Raises:
        InvalidPetAgeError: If the pet is older than the maximum insurable age
        DomainValidationError: If age is negative or pet name/species is blank
    """
    price = calculate_price(species, age, premium_plan)
    quotation = Quotation.create(
        pet_name=pet_name,
        species=species,
        breed=breed,
        age=age,
        premium_plan=premium_plan,
        price=price,
    )
    saved = quotation_repo.save_quotation(db, quotation)
    logger.info("Generated quotation %s priced at %s", saved.id, saved.price)
    return saved


def get_quotation_by_id(db: Session, quotation_id: str) -> Quotation | None:
    """Look up a single quotation. A missing record is not an error here."""
    return quotation_repo.get_quotation_by_id(db, quotation_id)


def list_quotations(db: Session) -> list[Quotation]:
    return quotation_repo.get_all_quotations(db)
