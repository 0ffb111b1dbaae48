"""Callable functions served alongside the API.

The confirmation function is called by the apply flow through the hosted
backend with the public key, so it is not behind the session check.
"""
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from jobportal.core.logging import setup_logging
from jobportal.features.notifications.confirmation import (
    ConfirmationRequest,
    ConfirmationResult,
    send_confirmation_email,
)

logger = setup_logging('api.functions')

router = APIRouter()


@router.post("/send-application-email", response_model=ConfirmationResult)
async def send_application_email(request: Request):
    """Send (simulate) an application confirmation email"""
    try:
        payload = ConfirmationRequest.model_validate(await request.json())
    except (ValueError, ValidationError) as e:
        logger.error(f"Error sending email: {str(e)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ConfirmationResult(
                success=False,
                error="Failed to send confirmation email"
            ).model_dump(exclude_none=True)
        )
    return send_confirmation_email(payload)
