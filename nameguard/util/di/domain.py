"""Domain layer DI providers."""

from dishka import Scope, provide

from nameguard.config import BindingSettings
from nameguard.domain.repository import BindingRepository
from nameguard.domain.service import BindingValidator
from nameguard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped: each login event gets a fresh
    validator over the shared, APP-scoped binding store.
    """

    scope = Scope.REQUEST

    @provide
    def get_binding_validator(
        self,
        binding_repository: BindingRepository,
        binding_settings: BindingSettings,
    ) -> BindingValidator:
        """Provide binding validator domain service."""
        return BindingValidator(
            binding_repository=binding_repository,
            track_addresses=binding_settings.track_addresses,
        )
