from fastapi import Request

from doorsite.config import Settings
from doorsite.utils.email import ResendClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_mailer(request: Request) -> ResendClient:
    return request.app.state.mailer
