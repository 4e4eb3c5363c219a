"""Domain model entities for nameguard."""

from nameguard.domain.model.binding import Binding
from nameguard.domain.model.decision import Allow, Decision, Deny, Unresolved
from nameguard.domain.model.login_event import LoginEvent

__all__ = [
    "Allow",
    "Binding",
    "Decision",
    "Deny",
    "LoginEvent",
    "Unresolved",
]
