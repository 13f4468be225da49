import sys

import httpx

from tatum_webhook.config import RegistrarSettings
from tatum_webhook.errors import ConfigurationError, TatumWebhookError
from tatum_webhook.logging_config import setup_logging
from tatum_webhook.services.registrar import register_subscription


def _load_settings() -> RegistrarSettings:
    # Logs go to stderr; stdout carries only the subscription id.
    try:
        settings = RegistrarSettings()
        setup_logging(settings.log_level, stream=sys.stderr)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
    settings.require()
    return settings


def main() -> None:
    try:
        settings = _load_settings()
        subscription_id = register_subscription(
            settings.tatum_api_key,
            settings.address,
            settings.webhook_url,
            settings.tatum_chain,
            base_url=settings.tatum_api_url_btc,
            timeout=settings.tatum_request_timeout,
        )
    except (TatumWebhookError, httpx.HTTPError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(subscription_id)


if __name__ == "__main__":
    main()
