"""Exception types shared by the registrar and the webhook receiver."""


class TatumWebhookError(Exception):
    """Base exception for this package."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(TatumWebhookError):
    """A required setting is missing. Raised before any I/O."""


class ProviderError(TatumWebhookError):
    """The provider answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Failed to create subscription ({status_code}): {body}")


class ProtocolError(TatumWebhookError):
    """The provider response did not have the expected shape."""


class AuthenticationFailure(TatumWebhookError):
    """Signature header missing or not matching the raw body."""


class MissingSignature(AuthenticationFailure):
    def __init__(self, message: str = "Missing signature") -> None:
        super().__init__(message)


class InvalidSignature(AuthenticationFailure):
    def __init__(self, message: str = "Invalid signature") -> None:
        super().__init__(message)


class PayloadFormatError(TatumWebhookError):
    """A signed body that is not valid JSON."""

    def __init__(self, message: str = "Malformed payload", detail: str = "") -> None:
        self.detail = detail
        super().__init__(message)
