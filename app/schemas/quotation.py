from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from app.domain.quotation import Quotation as QuotationDomain

# Prices travel as JSON numbers
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class QuotationRequest(BaseModel):
    # Left optional so the domain rules decide what is missing or blank
    name: str | None = None
    species: str | None = None
    breed: str | None = None
    age: int = 0
    premium: bool = False


class Quotation(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    pet_name: str
    species: str
    breed: str | None = None
    age: int
    premium_plan: bool
    price: Price
    expires_at: date
    expired: bool

    @classmethod
    def from_domain(cls, quotation: QuotationDomain) -> "Quotation":
        return cls(
            id=quotation.id,
            pet_name=quotation.pet_name,
            species=quotation.species,
            breed=quotation.breed,
            age=quotation.age,
            premium_plan=quotation.premium_plan,
            price=quotation.price,
            expires_at=quotation.expires_at,
            expired=quotation.is_expired(),
        )


class QuotationSnapshot(BaseModel):
    """Quotation payload as received from the quoting service.

    `expired` is ignored; expiry is recomputed from `expires_at`.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str
    pet_name: str | None = None
    species: str | None = None
    breed: str | None = None
    age: int
    premium_plan: bool = False
    price: Decimal | None = None
    expires_at: date
