import asyncio
from datetime import date, timedelta
from decimal import Decimal

import httpx
import pytest

from app.domain.policy import Policy, PolicyIssuedEvent
from app.domain.quotation import Quotation
from app.errors import (
    DomainValidationError,
    PolicyNotFoundError,
    QuotationExpiredError,
    QuotationNotFoundError,
)
from app.services.policy import PolicyIssuanceService


# ============================================================================
# FAKES
# ============================================================================


class FakeQuotationClient:
    def __init__(self, quotations: dict | None = None, error: Exception | None = None):
        self.quotations = quotations or {}
        self.error = error
        self.calls: list[str] = []

    async def find_by_id(self, quotation_id: str) -> Quotation | None:
        self.calls.append(quotation_id)
        if self.error is not None:
            raise self.error
        return self.quotations.get(quotation_id)


class FakePolicyStore:
    def __init__(self, error: Exception | None = None):
        self.policies: dict[str, Policy] = {}
        self.error = error

    async def save(self, policy: Policy) -> Policy:
        if self.error is not None:
            raise self.error
        self.policies[policy.id] = policy
        return policy

    async def find_by_id(self, policy_id: str) -> Policy | None:
        return self.policies.get(policy_id)


class FakeNotifier:
    def __init__(self, error: Exception | None = None):
        self.events: list[PolicyIssuedEvent] = []
        self.error = error

    async def publish_policy_issued(self, event: PolicyIssuedEvent) -> None:
        if self.error is not None:
            raise self.error
        self.events.append(event)


def _quotation(quotation_id: str = "q-1", expires_at: date | None = None) -> Quotation:
    return Quotation.reconstruct(
        id=quotation_id,
        pet_name="Max",
        species="DOG",
        breed=None,
        age=3,
        premium_plan=False,
        price=Decimal("12.00"),
        expires_at=expires_at or date.today() + timedelta(days=30),
    )


def _service(client=None, store=None, notifier=None) -> PolicyIssuanceService:
    return PolicyIssuanceService(
        quotation_client=client or FakeQuotationClient({"q-1": _quotation()}),
        policy_store=store or FakePolicyStore(),
        event_notifier=notifier or FakeNotifier(),
    )


def _issue(service: PolicyIssuanceService, quotation_id: str = "q-1", **owner) -> Policy:
    fields = {"owner_id": "o1", "owner_name": "John", "owner_email": "j@x.com"}
    fields.update(owner)
    return asyncio.run(service.issue_policy(quotation_id, **fields))


# ============================================================================
# HAPPY PATH
# ============================================================================


def test_issue_policy_persists_and_publishes():
    store = FakePolicyStore()
    notifier = FakeNotifier()
    service = _service(store=store, notifier=notifier)

    policy = _issue(service)

    assert policy.quotation_id == "q-1"
    assert policy.owner.id == "o1"
    assert policy.owner.name == "John"
    assert policy.owner.email == "j@x.com"
    assert policy.start_date == date.today()
    assert policy.is_active() is True
    assert store.policies == {policy.id: policy}
    assert notifier.events == [
        PolicyIssuedEvent(policy_id=policy.id, quotation_id="q-1", owner_email="j@x.com")
    ]


def test_quotation_valid_until_today_is_accepted():
    client = FakeQuotationClient({"q-1": _quotation(expires_at=date.today())})
    policy = _issue(_service(client=client))
    assert policy.quotation_id == "q-1"


def test_reissuing_same_quotation_creates_distinct_policies():
    store = FakePolicyStore()
    service = _service(store=store)

    first = _issue(service)
    second = _issue(service)

    assert first.id != second.id
    assert len(store.policies) == 2


# ============================================================================
# REJECTIONS
# ============================================================================


def test_missing_quotation_raises_not_found():
    client = FakeQuotationClient({})
    store = FakePolicyStore()
    notifier = FakeNotifier()

    with pytest.raises(QuotationNotFoundError) as exc_info:
        _issue(_service(client=client, store=store, notifier=notifier), "missing-id")

    assert "missing-id" in str(exc_info.value)
    assert exc_info.value.quotation_id == "missing-id"
    assert store.policies == {}
    assert notifier.events == []


def test_expired_quotation_is_rejected_without_side_effects():
    yesterday = date.today() - timedelta(days=1)
    client = FakeQuotationClient({"q-old": _quotation("q-old", expires_at=yesterday)})
    store = FakePolicyStore()
    notifier = FakeNotifier()

    with pytest.raises(QuotationExpiredError) as exc_info:
        _issue(_service(client=client, store=store, notifier=notifier), "q-old")

    assert "q-old" in str(exc_info.value)
    assert store.policies == {}
    assert notifier.events == []


@pytest.mark.parametrize("missing", ["owner_id", "owner_name", "owner_email"])
def test_missing_owner_field_is_rejected(missing):
    store = FakePolicyStore()

    with pytest.raises(DomainValidationError):
        _issue(_service(store=store), **{missing: None})

    assert store.policies == {}


# ============================================================================
# INFRASTRUCTURE FAILURES
# ============================================================================


def test_lookup_failure_propagates_unchanged():
    error = httpx.ConnectError("connection refused")
    client = FakeQuotationClient(error=error)
    store = FakePolicyStore()

    with pytest.raises(httpx.ConnectError) as exc_info:
        _issue(_service(client=client, store=store))

    assert exc_info.value is error
    assert store.policies == {}


def test_store_failure_skips_publication():
    store = FakePolicyStore(error=RuntimeError("database unavailable"))
    notifier = FakeNotifier()

    with pytest.raises(RuntimeError, match="database unavailable"):
        _issue(_service(store=store, notifier=notifier))

    assert notifier.events == []


def test_publish_failure_leaves_policy_persisted():
    store = FakePolicyStore()
    notifier = FakeNotifier(error=RuntimeError("broker down"))

    with pytest.raises(RuntimeError, match="broker down"):
        _issue(_service(store=store, notifier=notifier))

    assert len(store.policies) == 1


def test_lookup_happens_exactly_once():
    client = FakeQuotationClient({"q-1": _quotation()})
    _issue(_service(client=client))
    assert client.calls == ["q-1"]


# ============================================================================
# GET POLICY
# ============================================================================


def test_get_policy_returns_stored_policy():
    store = FakePolicyStore()
    service = _service(store=store)
    policy = _issue(service)

    assert asyncio.run(service.get_policy(policy.id)) == policy


def test_get_unknown_policy_raises_not_found():
    with pytest.raises(PolicyNotFoundError, match="nope"):
        asyncio.run(_service().get_policy("nope"))
