"""Capability interfaces the policy issuance flow depends on.

Concrete adapters are chosen at process start (see `app.api.deps`); the
issuance service never branches on which implementation it was given.
"""

from typing import Protocol

from app.domain.policy import Policy, PolicyIssuedEvent
from app.domain.quotation import Quotation


class QuotationLookupClient(Protocol):
    async def find_by_id(self, quotation_id: str) -> Quotation | None:
        """Return a snapshot of the quotation, or None if the quoting side has no such record."""
        ...


class PolicyStore(Protocol):
    async def save(self, policy: Policy) -> Policy: ...

    async def find_by_id(self, policy_id: str) -> Policy | None: ...


class EventNotifier(Protocol):
    async def publish_policy_issued(self, event: PolicyIssuedEvent) -> None: ...
