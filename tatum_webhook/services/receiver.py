import json
import logging
from collections.abc import Mapping
from typing import Any

from fastapi.responses import JSONResponse

from tatum_webhook.errors import (
    AuthenticationFailure,
    InvalidSignature,
    MissingSignature,
    PayloadFormatError,
)
from tatum_webhook.models.webhook import (
    TatumEventBody,
    TatumWebhookPayload,
    WebhookOutcome,
)
from tatum_webhook.services.signature import SIGNATURE_HEADER, verify_signature

logger = logging.getLogger(__name__)


def _signature_from(headers: Mapping[str, str]) -> str | None:
    for name, value in headers.items():
        if name.lower() == SIGNATURE_HEADER:
            return value
    return None


def authenticate(raw_body: bytes, headers: Mapping[str, str], secret: str) -> None:
    signature = _signature_from(headers)
    if not signature:
        raise MissingSignature()
    if not verify_signature(secret, raw_body, signature):
        raise InvalidSignature()


def parse_payload(raw_body: bytes) -> Any | PayloadFormatError:
    """Decode a verified body, returning the error instead of raising it.

    Any valid JSON document is accepted as is.
    """
    try:
        return json.loads(raw_body)
    except ValueError as exc:
        return PayloadFormatError(detail=str(exc))


def event_body(data: Any) -> TatumEventBody | None:
    if not isinstance(data, dict):
        return None
    return TatumWebhookPayload.model_validate(data).event_body()


def _log_payload(data: Any) -> None:
    logger.info(
        "Verified webhook received",
        extra={"outcome": WebhookOutcome.ACCEPTED.value, "payload": data},
    )
    body = event_body(data)
    if body is not None:
        logger.info(
            "Transaction event",
            extra={
                "tx_id": body.txId,
                "address": body.address,
                "amount": body.amount,
                "chain": body.chain,
            },
        )


def handle_webhook(
    raw_body: bytes, headers: Mapping[str, str], secret: str
) -> JSONResponse:
    try:
        authenticate(raw_body, headers, secret)
    except AuthenticationFailure as exc:
        outcome = (
            WebhookOutcome.REJECTED_NO_SIGNATURE
            if isinstance(exc, MissingSignature)
            else WebhookOutcome.REJECTED_BAD_SIGNATURE
        )
        logger.warning(
            "Webhook rejected", extra={"outcome": outcome.value, "error": exc.message}
        )
        return JSONResponse(status_code=401, content={"error": exc.message})

    result = parse_payload(raw_body)
    if isinstance(result, PayloadFormatError):
        logger.warning(
            "Webhook rejected",
            extra={
                "outcome": WebhookOutcome.REJECTED_BAD_JSON.value,
                "error": result.detail,
            },
        )
        return JSONResponse(status_code=400, content={"error": result.message})

    _log_payload(result)
    return JSONResponse(status_code=200, content={"success": True})
