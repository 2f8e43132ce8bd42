import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from doorsite.config import Settings, load_settings
from doorsite.dependencies import get_mailer
from doorsite.routes import contact, pages
from doorsite.utils.email import ResendClient

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    logger.info("Nate's Door Service is running at http://localhost:%s", settings.port)
    if settings.demo_mode:
        logger.warning("RESEND_API_KEY is not set: demo mode, contact submissions will fail until it is added")
    yield


def create_app(settings: Optional[Settings] = None, mailer: Optional[ResendClient] = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(title="Nate's Door Service", lifespan=lifespan)
    app.state.settings = settings
    app.state.mailer = mailer or ResendClient.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    def health_check(mailer: ResendClient = Depends(get_mailer)):
        return {"status": "ok", "email_configured": mailer.configured}

    app.include_router(contact.router)
    # Page router holds the catch-all, so it goes last.
    app.include_router(pages.router)
    return app


app = create_app()


def run():
    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
