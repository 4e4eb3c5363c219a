"""Binding repository implementation using SQL (PostgreSQL or SQLite)."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from nameguard.domain.error import StoreUnavailableError, StoreViolationError
from nameguard.domain.model import Binding
from nameguard.domain.repository import BindingRepository
from nameguard.domain.value import IdentityKey, PlayerName
from nameguard.persistence.database import create_session_factory
from nameguard.persistence.mappers import binding_to_dict, row_to_binding
from nameguard.persistence.tables import players_table
from nameguard.util.error import ConfigurationError

# Dialects with INSERT ... ON CONFLICT (...) DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlBindingRepository(BindingRepository):
    """SQL implementation of BindingRepository.

    Every operation runs in its own short transaction on a connection taken
    from the engine's pool, so lookups only see committed rows and a failed
    write is rolled back as a whole.
    """

    def __init__(self, engine: AsyncEngine, operation_timeout: float = 5.0) -> None:
        """Initialize repository with a database engine.

        Args:
            engine: SQLAlchemy async engine owning the connection pool
            operation_timeout: Seconds allowed for each store operation

        Raises:
            ConfigurationError: If the engine's dialect has no native upsert
        """
        dialect = engine.dialect.name
        if dialect not in _UPSERT_INSERTS:
            raise ConfigurationError(
                "store.driver", f"dialect {dialect} has no ON CONFLICT upsert"
            )

        self.engine = engine
        self.session_factory = create_session_factory(engine)
        self.operation_timeout = operation_timeout
        self._insert = _UPSERT_INSERTS[dialect]

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Open a bounded transaction and translate driver errors.

        Args:
            operation: Operation name used in error messages

        Yields:
            Session inside a transaction, committed on clean exit

        Raises:
            StoreViolationError: On a uniqueness conflict
            StoreUnavailableError: On connectivity errors, timeout, or a
                stored row that no longer validates
        """
        try:
            async with asyncio.timeout(self.operation_timeout):
                async with self.session_factory.begin() as session:
                    yield session
        except IntegrityError as e:
            raise StoreViolationError(operation, str(e.orig)) from e
        except TimeoutError as e:
            raise StoreUnavailableError(
                operation, f"timed out after {self.operation_timeout}s"
            ) from e
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailableError(operation, str(e) or type(e).__name__) from e
        except PydanticValidationError as e:
            raise StoreUnavailableError(
                operation, f"stored row failed validation: {e.error_count()} error(s)"
            ) from e

    async def find_by_name(self, name: PlayerName) -> Optional[Binding]:
        """Get binding by name.

        Args:
            name: Display name to look up

        Returns:
            Binding if found, None otherwise
        """
        stmt = select(players_table).where(players_table.c.name == name.root)
        async with self._transaction("find_by_name") as session:
            result = await session.execute(stmt)
            row = result.mappings().first()
            return row_to_binding(dict(row)) if row else None

    async def find_by_identity_key(
        self, identity_key: IdentityKey
    ) -> Optional[Binding]:
        """Get binding by identity key.

        Args:
            identity_key: Identity key to look up

        Returns:
            Binding if found, None otherwise
        """
        stmt = select(players_table).where(
            players_table.c.identity_key == identity_key.root
        )
        async with self._transaction("find_by_identity_key") as session:
            result = await session.execute(stmt)
            row = result.mappings().first()
            return row_to_binding(dict(row)) if row else None

    async def upsert(
        self,
        identity_key: IdentityKey,
        name: PlayerName,
        origin_address: Optional[str],
    ) -> None:
        """Insert or update a binding in a single statement.

        The conflict target is the primary key only. A clash on the name
        index is not absorbed and surfaces as StoreViolationError.

        Args:
            identity_key: Identity key (primary key)
            name: Display name to bind
            origin_address: Origin address of the login, if tracked
        """
        values = binding_to_dict(
            Binding(
                identity_key=identity_key,
                name=name,
                first_seen_address=origin_address,
                last_seen_address=origin_address,
            )
        )
        stmt = self._insert(players_table).values(**values)

        # first_seen_address is never part of the update
        updates = {"name": stmt.excluded.name}
        if origin_address is not None:
            updates["last_seen_address"] = stmt.excluded.last_seen_address

        stmt = stmt.on_conflict_do_update(
            index_elements=[players_table.c.identity_key],
            set_=updates,
        )
        async with self._transaction("upsert") as session:
            await session.execute(stmt)

    async def touch_last_seen(
        self, identity_key: IdentityKey, origin_address: str
    ) -> bool:
        """Update last seen address only.

        Args:
            identity_key: Identity key of the binding
            origin_address: New last seen address

        Returns:
            True if a row was updated
        """
        stmt = (
            update(players_table)
            .where(players_table.c.identity_key == identity_key.root)
            .values(last_seen_address=origin_address)
        )
        async with self._transaction("touch_last_seen") as session:
            result = await session.execute(stmt)

        return result.rowcount > 0
