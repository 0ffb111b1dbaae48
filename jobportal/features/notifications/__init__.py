"""Notification features."""

from .confirmation import (
    ConfirmationClient,
    ConfirmationRequest,
    ConfirmationResult,
    build_confirmation_email,
    send_confirmation_email,
)

__all__ = [
    'ConfirmationClient',
    'ConfirmationRequest',
    'ConfirmationResult',
    'build_confirmation_email',
    'send_confirmation_email',
]
