"""Policy issuance: turn a still-valid quotation into a persisted policy and announce it."""

import logging

from app.domain.policy import Owner, Policy
from app.domain.ports import EventNotifier, PolicyStore, QuotationLookupClient
from app.errors import PolicyNotFoundError, QuotationExpiredError, QuotationNotFoundError

logger = logging.getLogger(__name__)


class PolicyIssuanceService:
    def __init__(
        self,
        quotation_client: QuotationLookupClient,
        policy_store: PolicyStore,
        event_notifier: EventNotifier,
    ):
        self.quotation_client = quotation_client
        self.policy_store = policy_store
        self.event_notifier = event_notifier

    async def issue_policy(
        self,
        quotation_id: str,
        owner_id: str,
        owner_name: str,
        owner_email: str,
    ) -> Policy:
        """
        Issue a policy against a quotation.

        Steps run strictly in order and each one is attempted once:
        lookup -> expiry check -> build -> persist -> publish.
        The first failure stops the pipeline. A publish failure still leaves
        the policy persisted; nothing is rolled back.

        Raises:
            QuotationNotFoundError: If the quoting service has no such quotation
            QuotationExpiredError: If the quotation is past its expiry date
            DomainValidationError: If an owner field is missing
        """
        quotation = await self.quotation_client.find_by_id(quotation_id)
        if quotation is None:
            logger.info("Policy issuance rejected: quotation %s not found", quotation_id)
            raise QuotationNotFoundError(quotation_id)

        if quotation.is_expired():
            logger.info(
                "Policy issuance rejected: quotation %s expired on %s",
                quotation_id,
                quotation.expires_at,
            )
            raise QuotationExpiredError(quotation_id)

        owner = Owner(id=owner_id, name=owner_name, email=owner_email)
        policy = Policy.issue(quotation_id, owner)

        saved = await self.policy_store.save(policy)
        logger.info("Issued policy %s for quotation %s", saved.id, quotation_id)

        await self.event_notifier.publish_policy_issued(saved.to_event())
        return saved

    async def get_policy(self, policy_id: str) -> Policy:
        """
        Raises:
            PolicyNotFoundError: If no policy has this id
        """
        policy = await self.policy_store.find_by_id(policy_id)
        if policy is None:
            raise PolicyNotFoundError(policy_id)
        return policy
