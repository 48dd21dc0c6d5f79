from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.domain.policy import Policy as PolicyDomain


class IssuePolicyRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    quotation_id: str
    owner_id: str | None = None
    owner_name: str | None = None
    owner_email: str | None = None


class IssuePolicyResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    policy_id: str
    quotation_id: str
    active: bool

    @classmethod
    def from_domain(cls, policy: PolicyDomain) -> "IssuePolicyResponse":
        event = policy.to_event()
        return cls(
            policy_id=event.policy_id,
            quotation_id=event.quotation_id,
            active=policy.is_active(),
        )


class Policy(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    policy_id: str
    quotation_id: str
    owner_id: str
    owner_name: str
    owner_email: str
    start_date: date
    end_date: date
    active: bool

    @classmethod
    def from_domain(cls, policy: PolicyDomain) -> "Policy":
        return cls(
            policy_id=policy.id,
            quotation_id=policy.quotation_id,
            owner_id=policy.owner.id,
            owner_name=policy.owner.name,
            owner_email=policy.owner.email,
            start_date=policy.start_date,
            end_date=policy.end_date,
            active=policy.is_active(),
        )
