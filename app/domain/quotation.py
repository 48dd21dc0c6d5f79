from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from app.errors import DomainValidationError, InvalidPetAgeError

MAX_INSURABLE_AGE = 10
QUOTATION_EXPIRATION_DAYS = 30


@dataclass(frozen=True, slots=True)
class Quotation:
    """A priced, time-bounded offer to insure a pet.

    Instances are validated on construction, so an invalid quotation cannot
    exist. Use `create` for new quotations and `reconstruct` for records that
    were already issued (database rows, remote snapshots).

    Expiry is derived, never stored as a state: a quotation expiring "today"
    is still valid today.
    """

    id: str
    pet_name: str
    species: str
    breed: str | None
    age: int
    premium_plan: bool
    price: Decimal
    expires_at: date

    def __post_init__(self) -> None:
        _validate_age(self.age)
        _validate_not_blank(self.pet_name, "Pet name cannot be null or empty")
        _validate_not_blank(self.species, "Species cannot be null or empty")
        if self.price is None or self.price < 0:
            raise DomainValidationError("Price cannot be null or negative")

    @classmethod
    def create(
        cls,
        pet_name: str,
        species: str,
        breed: str | None,
        age: int,
        premium_plan: bool,
        price: Decimal,
        today: date | None = None,
    ) -> Quotation:
        issued_on = today or date.today()
        return cls(
            id=str(uuid.uuid4()),
            pet_name=pet_name,
            species=species,
            breed=breed,
            age=age,
            premium_plan=premium_plan,
            price=price,
            expires_at=issued_on + timedelta(days=QUOTATION_EXPIRATION_DAYS),
        )

    @classmethod
    def reconstruct(
        cls,
        id: str,
        pet_name: str,
        species: str,
        breed: str | None,
        age: int,
        premium_plan: bool,
        price: Decimal,
        expires_at: date,
    ) -> Quotation:
        return cls(
            id=id,
            pet_name=pet_name,
            species=species,
            breed=breed,
            age=age,
            premium_plan=premium_plan,
            price=price,
            expires_at=expires_at,
        )

    def is_expired(self, as_of: date | None = None) -> bool:
        return self.expires_at < (as_of or date.today())


def _validate_age(age: int) -> None:
    if age is None:
        raise DomainValidationError("Pet age is required")
    if age > MAX_INSURABLE_AGE:
        raise InvalidPetAgeError(MAX_INSURABLE_AGE)
    if age < 0:
        raise DomainValidationError("Pet age cannot be negative")


def _validate_not_blank(value: str | None, message: str) -> None:
    if value is None or not value.strip():
        raise DomainValidationError(message)
