from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from tatum_webhook.api.dependencies import get_settings
from tatum_webhook.config import ReceiverSettings
from tatum_webhook.services.receiver import handle_webhook

router = APIRouter()


@router.post("/webhook")
async def tatum_webhook(
    request: Request, settings: ReceiverSettings = Depends(get_settings)
) -> JSONResponse:
    # Signed bytes; never let FastAPI parse the JSON first.
    raw_body = await request.body()
    return handle_webhook(raw_body, request.headers, settings.tatum_hmac_secret)
