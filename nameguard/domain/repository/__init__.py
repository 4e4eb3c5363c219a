"""Repository interfaces for nameguard domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from nameguard.domain.repository.binding import BindingRepository

__all__ = [
    "BindingRepository",
]
