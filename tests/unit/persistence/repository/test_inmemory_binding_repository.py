"""Unit tests for InMemoryBindingRepository."""

import pytest

from nameguard.domain.error import StoreViolationError
from nameguard.domain.value import IdentityKey, PlayerName
from nameguard.persistence.repository.inmemory import InMemoryBindingRepository


class TestInMemoryBindingRepository:
    """The in-memory store must enforce the players table constraints."""

    @pytest.mark.asyncio
    async def test_upsert_inserts_then_updates(self):
        repo = InMemoryBindingRepository()
        key = IdentityKey("uuid-1")

        await repo.upsert(key, PlayerName("Alice"), "1.1.1.1")
        await repo.upsert(key, PlayerName("Alice"), "2.2.2.2")

        binding = await repo.find_by_identity_key(key)
        assert binding.first_seen_address == "1.1.1.1"
        assert binding.last_seen_address == "2.2.2.2"
        assert len(repo.all()) == 1

    @pytest.mark.asyncio
    async def test_upsert_rejects_name_held_by_other_key(self):
        repo = InMemoryBindingRepository()
        await repo.upsert(IdentityKey("uuid-1"), PlayerName("Alice"), "1.1.1.1")

        with pytest.raises(StoreViolationError):
            await repo.upsert(IdentityKey("uuid-2"), PlayerName("Alice"), "2.2.2.2")

        assert await repo.find_by_identity_key(IdentityKey("uuid-2")) is None

    @pytest.mark.asyncio
    async def test_touch_last_seen_reports_missing_row(self):
        repo = InMemoryBindingRepository()

        assert await repo.touch_last_seen(IdentityKey("uuid-1"), "1.1.1.1") is False
        assert repo.all() == []

    @pytest.mark.asyncio
    async def test_find_by_name_returns_none_when_unbound(self):
        repo = InMemoryBindingRepository()

        assert await repo.find_by_name(PlayerName("Nobody")) is None
