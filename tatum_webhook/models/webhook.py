from enum import Enum
from typing import Any

from pydantic import BaseModel


class WebhookOutcome(str, Enum):
    ACCEPTED = "accepted"
    REJECTED_NO_SIGNATURE = "rejected_no_signature"
    REJECTED_BAD_SIGNATURE = "rejected_bad_signature"
    REJECTED_BAD_JSON = "rejected_bad_json"


# Fields are Any: a signed notification is accepted whatever shape Tatum sends.


class TatumEventBody(BaseModel):
    txId: Any = None
    address: Any = None
    amount: Any = None
    chain: Any = None

    model_config = {"extra": "allow"}


class TatumWebhookPayload(BaseModel):
    address: Any = None
    amount: Any = None
    asset: Any = None
    blockNumber: Any = None
    txId: Any = None
    timestamp: Any = None
    subscriptionId: Any = None
    subscriptionType: Any = None
    type: Any = None
    counterAddress: Any = None
    chain: Any = None
    event: Any = None

    model_config = {"extra": "allow"}

    def event_body(self) -> TatumEventBody | None:
        if not isinstance(self.event, dict):
            return None
        body = self.event.get("body")
        if not isinstance(body, dict):
            return None
        return TatumEventBody.model_validate(body)
