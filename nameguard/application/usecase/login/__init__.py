"""Login use cases."""

from .handle_login import (
    HandleLoginRequest,
    HandleLoginResponse,
    HandleLoginUseCase,
    SessionHandle,
)

__all__ = [
    "HandleLoginRequest",
    "HandleLoginResponse",
    "HandleLoginUseCase",
    "SessionHandle",
]
