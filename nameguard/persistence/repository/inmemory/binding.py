"""In-memory binding repository for testing."""

import asyncio
from typing import Optional

from nameguard.domain.error import StoreViolationError
from nameguard.domain.model import Binding
from nameguard.domain.repository import BindingRepository
from nameguard.domain.value import IdentityKey, PlayerName


class InMemoryBindingRepository(BindingRepository):
    """In-memory implementation of BindingRepository for testing.

    Enforces the same primary key and unique name constraints as the
    players table. Writes hold a lock so each one is atomic.
    """

    def __init__(self) -> None:
        self._bindings: dict[str, Binding] = {}
        self._lock = asyncio.Lock()

    async def find_by_name(self, name: PlayerName) -> Optional[Binding]:
        """Find binding by name."""
        return self._holder_of(name)

    async def find_by_identity_key(
        self, identity_key: IdentityKey
    ) -> Optional[Binding]:
        """Find binding by identity key."""
        return self._bindings.get(identity_key.root)

    async def upsert(
        self,
        identity_key: IdentityKey,
        name: PlayerName,
        origin_address: Optional[str],
    ) -> None:
        """Insert or update binding, rejecting a name held by another key."""
        async with self._lock:
            holder = self._holder_of(name)
            if holder is not None and holder.identity_key != identity_key:
                raise StoreViolationError(
                    "upsert", f"name {name} already bound to {holder.identity_key}"
                )

            existing = self._bindings.get(identity_key.root)
            if existing is None:
                self._bindings[identity_key.root] = Binding(
                    identity_key=identity_key,
                    name=name,
                    first_seen_address=origin_address,
                    last_seen_address=origin_address,
                )
                return

            updates: dict[str, object] = {"name": name}
            if origin_address is not None:
                updates["last_seen_address"] = origin_address
            self._bindings[identity_key.root] = existing.model_copy(update=updates)

    async def touch_last_seen(
        self, identity_key: IdentityKey, origin_address: str
    ) -> bool:
        """Update last seen address of an existing binding."""
        async with self._lock:
            existing = self._bindings.get(identity_key.root)
            if existing is None:
                return False
            self._bindings[identity_key.root] = existing.model_copy(
                update={"last_seen_address": origin_address}
            )
            return True

    def _holder_of(self, name: PlayerName) -> Optional[Binding]:
        for binding in self._bindings.values():
            if binding.name == name:
                return binding
        return None

    def all(self) -> list[Binding]:
        """Snapshot of every stored binding (test inspection helper)."""
        return list(self._bindings.values())
