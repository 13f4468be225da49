from fastapi import Request

from tatum_webhook.config import ReceiverSettings


def get_settings(request: Request) -> ReceiverSettings:
    return request.app.state.settings
