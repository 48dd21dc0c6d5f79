import logging

import httpx

from app.core.config import settings
from app.domain.quotation import Quotation
from app.schemas.quotation import QuotationSnapshot

logger = logging.getLogger(__name__)


class HttpQuotationLookupClient:
    """Fetches quotation snapshots from the quoting service over HTTP.

    A 404 or an empty body is a lookup miss and yields None. Any other
    non-2xx status raises `httpx.HTTPStatusError` and transport failures raise
    `httpx.RequestError`; both are left for the caller.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.quoting_service_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.quoting_service_timeout
        self._transport = transport

    async def find_by_id(self, quotation_id: str) -> Quotation | None:
        url = f"{self.base_url}/{quotation_id}"
        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            response = await client.get(url, headers={"Accept": "application/json"})

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug("Quoting service has no quotation %s", quotation_id)
            return None
        response.raise_for_status()

        body = response.content.strip()
        if not body or body == b"null":
            logger.debug("Quoting service returned an empty body for quotation %s", quotation_id)
            return None

        snapshot = QuotationSnapshot.model_validate_json(body)
        return Quotation.reconstruct(
            id=snapshot.id,
            pet_name=snapshot.pet_name,
            species=snapshot.species,
            breed=snapshot.breed,
            age=snapshot.age,
            premium_plan=snapshot.premium_plan,
            price=snapshot.price,
            expires_at=snapshot.expires_at,
        )
