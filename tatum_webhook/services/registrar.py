import logging

import httpx
from pydantic import ValidationError

from tatum_webhook.config import DEFAULT_API_URL
from tatum_webhook.errors import ConfigurationError, ProtocolError, ProviderError
from tatum_webhook.models.subscription import (
    SubscriptionAttr,
    SubscriptionRequest,
    SubscriptionResponse,
)

logger = logging.getLogger(__name__)

NEXT_STEPS = (
    "Add the HMAC secret via PUT /v4/subscription",
    "Send a small transaction to the monitored address",
    "Watch the webhook receiver for a POST payload",
)


def subscription_endpoint(base_url: str) -> str:
    """Map a chain-specific API base URL to the subscription endpoint."""
    return f"{base_url.rstrip('/').removesuffix('/bitcoin')}/subscription"


class SubscriptionRegistrar:
    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.endpoint = subscription_endpoint(base_url)
        self._client = client
        self._timeout = timeout

    def register(
        self, api_key: str, address: str, callback_url: str, chain: str = "BTC"
    ) -> str:
        missing = [
            name
            for name, value in (
                ("TATUM_API_KEY", api_key),
                ("ADDRESS", address),
                ("WEBHOOK_URL", callback_url),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing required env vars: {', '.join(missing)}")

        request = SubscriptionRequest(
            attr=SubscriptionAttr(chain=chain, address=address, url=callback_url)
        )
        logger.info(
            "Registering webhook subscription",
            extra={"address": address, "webhook_url": callback_url, "chain": chain},
        )

        response = self._post(request, api_key)
        if not response.is_success:
            raise ProviderError(response.status_code, response.text)

        try:
            subscription = SubscriptionResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise ProtocolError(
                f"Unexpected subscription response: {response.text[:500]}"
            ) from exc

        logger.info("Subscription created", extra={"subscription_id": subscription.id})
        for number, step in enumerate(NEXT_STEPS, start=1):
            logger.info("Next step %d: %s", number, step)
        return subscription.id

    def _post(self, request: SubscriptionRequest, api_key: str) -> httpx.Response:
        kwargs = {
            "json": request.model_dump(mode="json"),
            "headers": {"x-api-key": api_key, "Content-Type": "application/json"},
        }
        if self._client is not None:
            return self._client.post(self.endpoint, **kwargs)
        with httpx.Client(timeout=self._timeout) as client:
            return client.post(self.endpoint, **kwargs)


def register_subscription(
    api_key: str,
    address: str,
    callback_url: str,
    chain: str = "BTC",
    *,
    base_url: str = DEFAULT_API_URL,
    client: httpx.Client | None = None,
    timeout: float = 30.0,
) -> str:
    """Create an ADDRESS_TRANSACTION subscription and return its id.

    A single attempt is made. Raises ConfigurationError before any request if
    a required value is empty, ProviderError on a non-2xx status and
    ProtocolError when the response carries no subscription id.
    """
    registrar = SubscriptionRegistrar(base_url, client=client, timeout=timeout)
    return registrar.register(api_key, address, callback_url, chain)
