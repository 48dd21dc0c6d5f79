from fastapi import APIRouter, Depends

from app.api.deps import get_policy_issuance_service
from app.schemas.policy import IssuePolicyRequest, IssuePolicyResponse, Policy
from app.services.policy import PolicyIssuanceService

router = APIRouter(prefix="/policies", tags=["policies"])


@router.post("", response_model=IssuePolicyResponse)
async def issue_new_policy(
    policy_data: IssuePolicyRequest,
    service: PolicyIssuanceService = Depends(get_policy_issuance_service),
):
    """
    Issue a policy against a quotation.

    - 404 if the quotation does not exist
    - 400 if the quotation has expired or an owner field is missing
    """
    policy = await service.issue_policy(
        quotation_id=policy_data.quotation_id,
        owner_id=policy_data.owner_id,
        owner_name=policy_data.owner_name,
        owner_email=policy_data.owner_email,
    )
    return IssuePolicyResponse.from_domain(policy)


@router.get("/{policy_id}", response_model=Policy)
async def get_policy_by_id(
    policy_id: str,
    service: PolicyIssuanceService = Depends(get_policy_issuance_service),
):
    policy = await service.get_policy(policy_id)
    return Policy.from_domain(policy)
