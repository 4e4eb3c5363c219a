"""Binding repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from nameguard.domain.model.binding import Binding
from nameguard.domain.value import IdentityKey, PlayerName


class BindingRepository(ABC):
    """Repository for Binding entity.

    The sole shared mutable resource. Implementations must enforce
    uniqueness of both identity_key and name, and must raise
    StoreViolationError (constraint conflict) or StoreUnavailableError
    (connectivity, timeout) instead of partially applying a write.
    """

    @abstractmethod
    async def find_by_name(self, name: PlayerName) -> Optional[Binding]:
        """Find the binding holding a name.

        Args:
            name: Display name to look up

        Returns:
            The binding if found, None otherwise

        Raises:
            StoreUnavailableError: If the store cannot be read
        """
        pass

    @abstractmethod
    async def find_by_identity_key(
        self, identity_key: IdentityKey
    ) -> Optional[Binding]:
        """Find the binding owned by an identity key.

        Args:
            identity_key: Identity key to look up

        Returns:
            The binding if found, None otherwise

        Raises:
            StoreUnavailableError: If the store cannot be read
        """
        pass

    @abstractmethod
    async def upsert(
        self,
        identity_key: IdentityKey,
        name: PlayerName,
        origin_address: Optional[str],
    ) -> None:
        """Insert or update the binding for an identity key atomically.

        No row for the key: insert with first and last seen address set to
        origin_address. Existing row: set name and last seen address, keep
        first seen address. A None origin_address leaves last seen address
        untouched on update.

        Args:
            identity_key: Identity key (primary key)
            name: Display name to bind
            origin_address: Origin address of the login, if tracked

        Raises:
            StoreViolationError: If the name is held by another identity key
            StoreUnavailableError: If the store cannot be written
        """
        pass

    @abstractmethod
    async def touch_last_seen(
        self, identity_key: IdentityKey, origin_address: str
    ) -> bool:
        """Refresh the last seen address of an existing binding.

        Args:
            identity_key: Identity key of the binding
            origin_address: New last seen address

        Returns:
            True if a binding was updated, False if none exists for the key

        Raises:
            StoreUnavailableError: If the store cannot be written
        """
        pass
