from enum import Enum

from pydantic import BaseModel


class SubscriptionType(str, Enum):
    ADDRESS_TRANSACTION = "ADDRESS_TRANSACTION"


class SubscriptionAttr(BaseModel):
    chain: str
    address: str
    url: str


class SubscriptionRequest(BaseModel):
    type: SubscriptionType = SubscriptionType.ADDRESS_TRANSACTION
    attr: SubscriptionAttr


class SubscriptionResponse(BaseModel):
    id: str

    model_config = {"extra": "ignore"}
