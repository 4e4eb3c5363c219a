"""Login event routes.

The host forwards every join to ``POST /login-events`` before the session is
fully established and applies the answer: kick with the given message and
hide the join broadcast, or let the player in.
"""

from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from nameguard.application.usecase.login import (
    HandleLoginRequest,
    HandleLoginUseCase,
    SessionHandle,
)
from nameguard.domain.model import Deny, Unresolved

router = APIRouter(prefix="/login-events", tags=["login"], route_class=DishkaRoute)


class LoginEventAPIResponse(BaseModel):
    """Instructions for the host."""

    decision: Literal["allow", "deny", "unresolved"]
    kick: bool
    kick_message: str | None = None
    suppress_join_message: bool = False
    reason: str | None = None


class RecordingSessionHandle(SessionHandle):
    """Session handle that records the rejection for the HTTP response."""

    def __init__(self) -> None:
        self.kick_message: str | None = None
        self.suppress_join_message = False

    def reject(self, message: str, suppress_join_message: bool = True) -> None:
        """Record the rejection instead of acting on a live session."""
        self.kick_message = message
        self.suppress_join_message = suppress_join_message

    @property
    def rejected(self) -> bool:
        return self.kick_message is not None


@router.post("", response_model=LoginEventAPIResponse)
async def handle_login_event(
    request: HandleLoginRequest,
    handle_login_use_case: FromDishka[HandleLoginUseCase],
) -> LoginEventAPIResponse:
    """Decide whether a joining player may keep their name.

    Always answers 200; store failures produce an "unresolved" decision
    and the host leaves the session alone.

    Args:
        request: Name, identity key and origin address of the joining player
        handle_login_use_case: Handle login use case from DI

    Returns:
        Decision and kick instructions
    """
    session = RecordingSessionHandle()
    result = await handle_login_use_case.execute(request, session)

    decision = result.decision
    if isinstance(decision, Deny):
        reason = decision.reason
    elif isinstance(decision, Unresolved):
        reason = decision.error
    else:
        reason = None

    return LoginEventAPIResponse(
        decision=decision.kind.value,
        kick=session.rejected,
        kick_message=session.kick_message,
        suppress_join_message=session.suppress_join_message,
        reason=reason,
    )
