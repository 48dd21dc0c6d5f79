from fastapi import Depends
from sqlalchemy.orm import Session

from app.db import SessionLocal
from app.domain.ports import EventNotifier, PolicyStore, QuotationLookupClient
from app.repositories.policy import SqlPolicyStore
from app.services.events import LoggingEventNotifier
from app.services.policy import PolicyIssuanceService
from app.services.quotation_client import HttpQuotationLookupClient


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_quotation_client() -> QuotationLookupClient:
    """Lookup client pointed at the configured quoting service URL."""
    return HttpQuotationLookupClient()


def get_policy_store(db: Session = Depends(get_db)) -> PolicyStore:
    return SqlPolicyStore(db)


def get_event_notifier() -> EventNotifier:
    return LoggingEventNotifier()


def get_policy_issuance_service(
    quotation_client: QuotationLookupClient = Depends(get_quotation_client),
    policy_store: PolicyStore = Depends(get_policy_store),
    event_notifier: EventNotifier = Depends(get_event_notifier),
) -> PolicyIssuanceService:
    return PolicyIssuanceService(
        quotation_client=quotation_client,
        policy_store=policy_store,
        event_notifier=event_notifier,
    )
