"""BindingValidator against a real SQL store."""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine

from nameguard.domain.model import Allow, Deny
from nameguard.domain.service import BindingValidator
from nameguard.domain.value import IdentityKey, PlayerName
from nameguard.persistence.repository import SqlBindingRepository


@pytest.fixture
def repo(sqlite_engine: AsyncEngine) -> SqlBindingRepository:
    return SqlBindingRepository(sqlite_engine)


@pytest.fixture
def validator(repo: SqlBindingRepository) -> BindingValidator:
    return BindingValidator(repo)


class TestBindingValidatorSql:
    """End-to-end binding policy over SQLite."""

    @pytest.mark.asyncio
    async def test_impersonation_scenario(
        self, validator: BindingValidator, repo: SqlBindingRepository
    ):
        """Claim, return from a new address, then an impostor is denied."""
        first = await validator.evaluate("Alice", "uuid-1", "1.1.1.1")
        second = await validator.evaluate("Alice", "uuid-1", "2.2.2.2")
        impostor = await validator.evaluate("Alice", "uuid-2", "3.3.3.3")

        assert first == Allow(claimed=True)
        assert second == Allow(claimed=False)
        assert isinstance(impostor, Deny)
        assert impostor.bound_identity_key == "uuid-1"

        binding = await repo.find_by_name(PlayerName("Alice"))
        assert binding.identity_key == IdentityKey("uuid-1")
        assert binding.first_seen_address == "1.1.1.1"
        assert binding.last_seen_address == "2.2.2.2"
        assert await repo.find_by_identity_key(IdentityKey("uuid-2")) is None

    @pytest.mark.asyncio
    async def test_concurrent_claims_allow_exactly_one(
        self, validator: BindingValidator, repo: SqlBindingRepository
    ):
        """The unique name index arbitrates simultaneous first logins."""
        keys = [f"uuid-{i}" for i in range(5)]

        decisions = await asyncio.gather(
            *(validator.evaluate("Alice", key, "1.1.1.1") for key in keys)
        )

        allowed = [d for d in decisions if isinstance(d, Allow)]
        denied = [d for d in decisions if isinstance(d, Deny)]
        assert len(allowed) == 1
        assert len(denied) == len(keys) - 1

        binding = await repo.find_by_name(PlayerName("Alice"))
        winner = keys[decisions.index(allowed[0])]
        assert binding.identity_key == IdentityKey(winner)

    @pytest.mark.asyncio
    async def test_untracked_addresses_stay_empty(self, repo: SqlBindingRepository):
        validator = BindingValidator(repo, track_addresses=False)

        await validator.evaluate("Alice", "uuid-1", "1.1.1.1")
        decision = await validator.evaluate("Alice", "uuid-1", "2.2.2.2")

        assert decision == Allow(claimed=False)
        binding = await repo.find_by_identity_key(IdentityKey("uuid-1"))
        assert binding.first_seen_address is None
        assert binding.last_seen_address is None
