"""Domain services."""

from .binding_validator import BindingValidator

__all__ = [
    "BindingValidator",
]
