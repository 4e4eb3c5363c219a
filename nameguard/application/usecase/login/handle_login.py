"""Handle login use case."""

from abc import ABC, abstractmethod

import logfire
from pydantic import BaseModel

from nameguard.application.usecase.base import BaseUseCase
from nameguard.config import BindingSettings
from nameguard.domain.model import Decision, Deny
from nameguard.domain.service import BindingValidator


class SessionHandle(ABC):
    """Host capability to act on the joining player's session."""

    @abstractmethod
    def reject(self, message: str, suppress_join_message: bool = True) -> None:
        """Terminate the session before it is fully established.

        Args:
            message: Message shown to the rejected player
            suppress_join_message: Whether to hide the join broadcast
        """
        pass


class HandleLoginRequest(BaseModel):
    """Login event as reported by the host.

    Fields are plain strings; validation is the validator's job so that a
    malformed event becomes an unresolved decision instead of an error.
    """

    name: str
    identity_key: str
    origin_address: str | None = None


class HandleLoginResponse(BaseModel):
    """Outcome of a handled login event."""

    decision: Decision
    rejected: bool


class HandleLoginUseCase(BaseUseCase[HandleLoginRequest, HandleLoginResponse]):
    """Use case run by the host for every joining player."""

    def __init__(
        self, binding_validator: BindingValidator, binding_settings: BindingSettings
    ) -> None:
        """Initialize handle login use case.

        Args:
            binding_validator: Binding validator domain service
            binding_settings: Binding policy settings (rejection message)
        """
        self.binding_validator = binding_validator
        self.binding_settings = binding_settings

    async def execute(
        self, request: HandleLoginRequest, session: SessionHandle
    ) -> HandleLoginResponse:
        """Evaluate the login and reject the session on Deny.

        Allow and Unresolved leave the session untouched.

        Args:
            request: Login event fields
            session: Host handle for the joining session

        Returns:
            The decision and whether the session was rejected
        """
        decision = await self.binding_validator.evaluate(
            request.name, request.identity_key, request.origin_address
        )

        if not isinstance(decision, Deny):
            return HandleLoginResponse(decision=decision, rejected=False)

        session.reject(
            self.binding_settings.rejection_message, suppress_join_message=True
        )
        logfire.info(
            "Session rejected",
            name=request.name,
            identity_key=request.identity_key,
            reason=decision.reason,
        )
        return HandleLoginResponse(decision=decision, rejected=True)
