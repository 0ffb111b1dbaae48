"""Application confirmation email.

Two halves live here:

* ``send_confirmation_email`` is the callable function itself. It builds the
  confirmation email and logs it; no mail is dispatched. The email is
  returned as a preview instead.
* ``ConfirmationClient`` is what the apply flow uses to call that function
  through the hosted backend.

Example:
    ```python
    from jobportal.features.notifications import send_confirmation_email, ConfirmationRequest

    result = send_confirmation_email(ConfirmationRequest(
        email='ada@example.com', jobTitle='UX Designer', company='Design Studio'
    ))
    print(result.emailPreview.subject)
    ```
"""
from typing import Optional

from pydantic import BaseModel

from jobportal.core.backend import BackendClient
from jobportal.core.exceptions import BackendError
from jobportal.core.logging import setup_logging

logger = setup_logging('notifications')

EMAIL_TEMPLATE = """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h1 style="color: #3B82F6;">Application Confirmed!</h1>
  <p>Dear Candidate,</p>
  <p>Thank you for applying for the <strong>{job_title}</strong> position at <strong>{company}</strong>.</p>
  <p>We have received your application and our team will review it shortly. You will receive further notifications regarding your interview and opportunities.</p>
  <div style="background: #F3F4F6; padding: 20px; margin: 20px 0; border-radius: 8px;">
    <h3 style="margin: 0 0 10px 0; color: #374151;">Next Steps:</h3>
    <ul style="margin: 0; padding-left: 20px;">
      <li>Our HR team will review your application within 3-5 business days</li>
      <li>If selected, you'll receive an interview invitation</li>
      <li>You can schedule your AI-powered interview at your convenience</li>
    </ul>
  </div>
  <p>Best of luck with your application!</p>
  <p style="color: #6B7280;">
    Best regards,<br>
    The JobPortal Team
  </p>
</div>
"""


class ConfirmationRequest(BaseModel):
    """Payload of the confirmation function; field names are part of its wire format."""
    email: str
    jobTitle: str
    company: str


class EmailContent(BaseModel):
    to: str
    subject: str
    html: str


class ConfirmationResult(BaseModel):
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
    emailPreview: Optional[EmailContent] = None


def build_confirmation_email(request: ConfirmationRequest) -> EmailContent:
    """Render the confirmation email for an application."""
    return EmailContent(
        to=request.email,
        subject=f"Application Confirmation - {request.jobTitle} at {request.company}",
        html=EMAIL_TEMPLATE.format(job_title=request.jobTitle, company=request.company)
    )


def send_confirmation_email(request: ConfirmationRequest) -> ConfirmationResult:
    """Pretend to send the confirmation email and return what would be sent."""
    logger.info(
        f"Sending confirmation email to {request.email} "
        f"for {request.jobTitle} at {request.company}"
    )
    content = build_confirmation_email(request)
    return ConfirmationResult(
        success=True,
        message="Confirmation email sent successfully",
        emailPreview=content
    )


class ConfirmationClient:
    """Calls the remote confirmation function."""

    def __init__(self, backend: BackendClient, function_name: str = 'send-application-email'):
        self.backend = backend
        self.function_name = function_name

    def send(self, email: str, job_title: str, company: str) -> ConfirmationResult:
        """Request a confirmation email.

        An error reply from the function is returned as an unsuccessful
        result; the application it confirms is already saved.

        Raises:
            BackendError: If the function cannot be reached
        """
        payload = ConfirmationRequest(email=email, jobTitle=job_title, company=company)
        try:
            data = self.backend.invoke(self.function_name, payload.model_dump())
        except BackendError as e:
            if e.status_code is None:
                raise
            data = {'success': False, 'error': e.message}
        result = ConfirmationResult.model_validate(data or {'success': False})
        if not result.success:
            logger.warning(f"Confirmation email for {email} not sent: {result.error}")
        return result
