from sqlalchemy.orm import Session

from app.db.models.policy import Policy as PolicyModel
from app.domain.policy import Owner, Policy


def _to_domain(row: PolicyModel) -> Policy:
    return Policy(
        id=row.id,
        quotation_id=row.quotation_id,
        owner=Owner(id=row.owner_id, name=row.owner_name, email=row.owner_email),
        start_date=row.start_date,
        end_date=row.end_date,
        active=row.active,
    )


def get_policy_by_id(db: Session, policy_id: str) -> Policy | None:
    """Get a policy by ID."""
    row = db.query(PolicyModel).filter(PolicyModel.id == policy_id).first()
    return _to_domain(row) if row else None


def get_policies_by_quotation_id(db: Session, quotation_id: str) -> list[Policy]:
    """Get all policies issued against a quotation."""
    rows = db.query(PolicyModel).filter(PolicyModel.quotation_id == quotation_id).all()
    return [_to_domain(row) for row in rows]


def create_policy(db: Session, policy: Policy) -> Policy:
    """Persist a new policy with the owner flattened into columns. Pure data access - no business logic."""
    db_policy = PolicyModel(
        id=policy.id,
        quotation_id=policy.quotation_id,
        owner_id=policy.owner.id,
        owner_name=policy.owner.name,
        owner_email=policy.owner.email,
        start_date=policy.start_date,
        end_date=policy.end_date,
        active=policy.active,
    )
    db.add(db_policy)
    db.commit()
    db.refresh(db_policy)
    return _to_domain(db_policy)


class SqlPolicyStore:
    """PolicyStore backed by the request's SQLAlchemy session."""

    def __init__(self, db: Session):
        self._db = db

    async def save(self, policy: Policy) -> Policy:
        return create_policy(self._db, policy)

    async def find_by_id(self, policy_id: str) -> Policy | None:
        return get_policy_by_id(self._db, policy_id)
