"""In-memory repository implementations for testing."""

from .binding import InMemoryBindingRepository

__all__ = [
    "InMemoryBindingRepository",
]
