from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date

from app.errors import DomainValidationError

POLICY_DURATION_YEARS = 1


def _add_years(start: date, years: int) -> date:
    try:
        return start.replace(year=start.year + years)
    except ValueError:
        # Feb 29 on a non-leap target year
        return start.replace(year=start.year + years, day=28)


@dataclass(frozen=True, slots=True)
class Owner:
    id: str
    name: str
    email: str

    def __post_init__(self) -> None:
        for field_name in ("id", "name", "email"):
            if getattr(self, field_name) is None:
                raise DomainValidationError(f"Owner {field_name} is required")


@dataclass(frozen=True, slots=True)
class PolicyIssuedEvent:
    policy_id: str
    quotation_id: str
    owner_email: str


@dataclass(frozen=True, slots=True)
class Policy:
    """An insurance contract issued from a still-valid quotation.

    Semantics:
    - the coverage window is [start_date, end_date], end_date inclusive
    - a policy is active if the stored flag is set AND end_date >= as_of
    """

    id: str
    quotation_id: str
    owner: Owner
    start_date: date
    end_date: date
    active: bool = True

    @classmethod
    def issue(cls, quotation_id: str, owner: Owner, today: date | None = None) -> Policy:
        start = today or date.today()
        return cls(
            id=str(uuid.uuid4()),
            quotation_id=quotation_id,
            owner=owner,
            start_date=start,
            end_date=_add_years(start, POLICY_DURATION_YEARS),
            active=True,
        )

    def is_expired(self, as_of: date | None = None) -> bool:
        return (as_of or date.today()) > self.end_date

    def is_active(self, as_of: date | None = None) -> bool:
        return self.active and not self.is_expired(as_of)

    def to_event(self) -> PolicyIssuedEvent:
        return PolicyIssuedEvent(
            policy_id=self.id,
            quotation_id=self.quotation_id,
            owner_email=self.owner.email,
        )
