import logging
from datetime import datetime, timezone

from app.domain.policy import PolicyIssuedEvent

logger = logging.getLogger(__name__)


class LoggingEventNotifier:
    """EventNotifier that records domain events in the application log.

    Stands in for a real message sink (e.g. billing) until one is wired.
    """

    async def publish_policy_issued(self, event: PolicyIssuedEvent) -> None:
        logger.info(
            "DOMAIN EVENT PUBLISHED: PolicyIssuedEvent policy_id=%s quotation_id=%s owner_email=%s timestamp=%s",
            event.policy_id,
            event.quotation_id,
            event.owner_email,
            datetime.now(timezone.utc).isoformat(),
        )
