"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from nameguard.config import Settings
from nameguard.domain.repository import BindingRepository
from nameguard.persistence.database import create_engine
from nameguard.persistence.repository import SqlBindingRepository
from nameguard.util.di.base import ProviderBase
from nameguard.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using the configured SQL store."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposing its pool when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Binding store connection pool closed")

    @provide(scope=Scope.APP)
    def get_binding_repository(
        self, engine: AsyncEngine, settings: Settings
    ) -> BindingRepository:
        """Provide Binding repository.

        Each operation opens its own transaction, so one store instance is
        shared by all login events.
        """
        return SqlBindingRepository(
            engine, operation_timeout=settings.store.operation_timeout
        )
