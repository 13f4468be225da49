from typing import ClassVar

from pydantic_settings import BaseSettings

from tatum_webhook.errors import ConfigurationError

DEFAULT_API_URL = "https://api.tatum.io/v3/bitcoin"


class _Settings(BaseSettings):
    required_fields: ClassVar[tuple[str, ...]] = ()

    def require(self) -> None:
        missing = [
            name.upper() for name in self.required_fields if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required env vars: {', '.join(missing)}"
            )


class RegistrarSettings(_Settings):
    tatum_api_key: str = ""
    address: str = ""
    webhook_url: str = ""
    tatum_api_url_btc: str = DEFAULT_API_URL
    tatum_chain: str = "BTC"
    tatum_request_timeout: float = 30.0
    log_level: str = "INFO"

    required_fields: ClassVar[tuple[str, ...]] = ("tatum_api_key", "address", "webhook_url")

    model_config = {"env_file": ".env", "extra": "ignore", "frozen": True}


class ReceiverSettings(_Settings):
    tatum_hmac_secret: str = ""
    receiver_host: str = "0.0.0.0"
    receiver_port: int = 8787
    log_level: str = "INFO"

    required_fields: ClassVar[tuple[str, ...]] = ("tatum_hmac_secret",)

    model_config = {"env_file": ".env", "extra": "ignore", "frozen": True}
