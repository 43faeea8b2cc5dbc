from .base import (
    AdminAuthenticationError,
    AdminNotConfiguredError,
    AppError,
    InfrastructureError,
    InvalidInputError,
    InvalidMeetingTimeError,
    TokenSigningError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AdminAuthenticationError",
    "AdminNotConfiguredError",
    "AppError",
    "InfrastructureError",
    "InvalidInputError",
    "InvalidMeetingTimeError",
    "TokenSigningError",
    "handle_app_error",
    "register_error_handler",
]
