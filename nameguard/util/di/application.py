"""Application layer DI providers."""

from dishka import Scope, provide

from nameguard.application.usecase.login import HandleLoginUseCase
from nameguard.config import BindingSettings
from nameguard.domain.service import BindingValidator
from nameguard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_handle_login_use_case(
        self,
        binding_validator: BindingValidator,
        binding_settings: BindingSettings,
    ) -> HandleLoginUseCase:
        """Provide handle login use case."""
        return HandleLoginUseCase(
            binding_validator=binding_validator,
            binding_settings=binding_settings,
        )
