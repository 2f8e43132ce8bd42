import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from doorsite.config import Settings
from doorsite.dependencies import get_mailer, get_settings
from doorsite.errors import ContactError
from doorsite.schemas import ContactSubmission
from doorsite.utils.email import ResendClient
from doorsite.utils.quote_email import build_quote_email

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["contact"])


async def read_submission(request: Request) -> ContactSubmission:
    try:
        data = await request.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        data = {}
    return ContactSubmission.model_validate(data)


@router.post("/contact")
@router.post("/contact/", include_in_schema=False)
async def submit_contact(
    request: Request,
    settings: Settings = Depends(get_settings),
    mailer: ResendClient = Depends(get_mailer),
):
    """Validate a quote request and forward it by email."""
    submission = await read_submission(request)

    try:
        submission.require_fields()
    except ContactError as e:
        logger.info("Rejected contact submission: %s", e)
        return JSONResponse(content={"error": e.public_message}, status_code=e.status_code)

    email = build_quote_email(submission, settings)
    try:
        await run_in_threadpool(mailer.send, email)
    except ContactError as e:
        logger.error("Resend error: %s", e)
        return JSONResponse(content={"error": e.public_message}, status_code=e.status_code)
    except Exception as e:
        logger.error("Resend error: %s", e)
        return JSONResponse(
            content={"error": ContactError.public_message},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return {"success": True}
