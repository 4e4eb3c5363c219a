"""SQL repository implementations."""

from nameguard.persistence.repository.binding import SqlBindingRepository

__all__ = [
    "SqlBindingRepository",
]
