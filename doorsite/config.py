import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_FROM_EMAIL = "Nate's Door Service <onboarding@resend.dev>"
DEFAULT_TO_EMAIL = "contact@natesdoorservice.com"
DEFAULT_RESEND_API_URL = "https://api.resend.com/emails"


class Settings(BaseModel):
    resend_api_key: Optional[str] = None
    resend_api_url: str = DEFAULT_RESEND_API_URL
    from_email: str = DEFAULT_FROM_EMAIL
    to_email: str = DEFAULT_TO_EMAIL
    host: str = "0.0.0.0"
    port: int = 3000
    site_dir: str = "public"
    cors_origins: List[str] = ["*"]

    @property
    def demo_mode(self) -> bool:
        """No API key: pages are served but contact submissions cannot be sent."""
        return not self.resend_api_key


def load_settings() -> Settings:
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        resend_api_key=os.getenv("RESEND_API_KEY") or None,
        resend_api_url=os.getenv("RESEND_API_URL", DEFAULT_RESEND_API_URL),
        from_email=os.getenv("FROM_EMAIL") or DEFAULT_FROM_EMAIL,
        to_email=os.getenv("TO_EMAIL") or DEFAULT_TO_EMAIL,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 3000)),
        site_dir=os.getenv("SITE_DIR", "public"),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )
