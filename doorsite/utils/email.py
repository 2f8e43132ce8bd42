import logging
from typing import Optional

import requests

from doorsite.config import DEFAULT_RESEND_API_URL, Settings
from doorsite.errors import ConfigurationError, DeliveryError
from doorsite.schemas import OutboundEmail

logger = logging.getLogger(__name__)


class ResendClient:
    """Thin wrapper over the Resend ``POST /emails`` endpoint.

    Built once at startup. Without an API key the client is in demo mode and
    every ``send`` fails with ``ConfigurationError``.
    """

    def __init__(self, api_key: Optional[str], api_url: str = DEFAULT_RESEND_API_URL, timeout: float = 10):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResendClient":
        return cls(settings.resend_api_key, api_url=settings.resend_api_url)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def send(self, email: OutboundEmail) -> dict:
        if not self.api_key:
            raise ConfigurationError("RESEND_API_KEY is not set. Add it to your .env file.")

        headers = {
            "accept": "application/json",
            "authorization": f"Bearer {self.api_key}",
            "content-type": "application/json",
        }
        try:
            response = requests.post(self.api_url, json=email.to_payload(), headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise DeliveryError(str(e)) from e

        if not response.ok:
            raise DeliveryError(_error_message(response))

        data = response.json() if response.content else {}
        logger.info("Mail sent to %s (id=%s)", ", ".join(email.to), data.get("id"))
        return data


def _error_message(response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return f"{response.status_code}: {body['message']}"
    return f"{response.status_code}: {response.text}"
