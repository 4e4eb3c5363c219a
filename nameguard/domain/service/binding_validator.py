"""Binding validator domain service."""

from typing import Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from nameguard.domain.error import (
    InvalidEventError,
    StoreUnavailableError,
    StoreViolationError,
)
from nameguard.domain.model import Allow, Decision, Deny, LoginEvent, Unresolved
from nameguard.domain.repository import BindingRepository
from nameguard.domain.value import MAX_ADDRESS_LENGTH, OriginAddress


class BindingValidator:
    """Decides whether a login may use the name it claims.

    A name free in the store is claimed by the first identity key that logs
    in with it. Afterwards only that identity key may use it. The write is
    optimistic: the store's unique name index arbitrates concurrent claims,
    and a conflict is re-checked before any Allow is returned.

    Store failures are not retried and yield Unresolved, leaving the session
    to the host's default behaviour (fail-open).
    """

    def __init__(
        self, binding_repository: BindingRepository, track_addresses: bool = True
    ) -> None:
        """Initialize binding validator.

        Args:
            binding_repository: Binding store
            track_addresses: Whether origin addresses are recorded
        """
        self.binding_repository = binding_repository
        self.track_addresses = track_addresses

    async def evaluate(
        self, name: str, identity_key: str, origin_address: Optional[str] = None
    ) -> Decision:
        """Evaluate a login event and record accepted bindings.

        Steps:
        1. Validate the event (no store access for malformed input)
        2. Look up the binding holding the name
        3. Free name: upsert the binding for this identity key, Allow
        4. Same identity key: refresh last seen address, Allow
        5. Different identity key: Deny, no write

        Args:
            name: Display name the player joined with
            identity_key: Platform identity key of the player
            origin_address: Network address of the connection

        Returns:
            Allow, Deny or Unresolved. Never raises for store errors.
        """
        with logfire.span(
            "binding_validator.evaluate", name=name, identity_key=identity_key
        ):
            try:
                event = self._parse_event(name, identity_key, origin_address)
            except InvalidEventError as e:
                logfire.warn(
                    "Login event rejected as malformed",
                    name=name,
                    identity_key=identity_key,
                    error=str(e),
                )
                return Unresolved(error=str(e), error_type="invalid_event")

            try:
                decision = await self._decide(event)
            except StoreUnavailableError as e:
                logfire.error(
                    "Login event left unresolved - binding store unavailable",
                    name=event.name.root,
                    identity_key=event.identity_key.root,
                    operation=e.operation,
                    error=str(e),
                    _exc_info=True,
                )
                return Unresolved(error=str(e), error_type="store_unavailable")

            logfire.info(
                "Login event decided",
                name=event.name.root,
                identity_key=event.identity_key.root,
                decision=decision.kind.value,
            )
            return decision

    def _parse_event(
        self, name: str, identity_key: str, origin_address: Optional[str]
    ) -> LoginEvent:
        """Build a validated login event.

        Only the name and identity key can make an event invalid. An
        address that does not fit the address columns is dropped.

        Raises:
            InvalidEventError: If name or identity key is empty or too long
        """
        address = None
        if self.track_addresses:
            address = self._parse_address(origin_address)

        try:
            return LoginEvent(
                name=name, identity_key=identity_key, origin_address=address
            )
        except PydanticValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidEventError(details) from e

    def _parse_address(
        self, origin_address: Optional[str]
    ) -> Optional[OriginAddress]:
        """Validate the origin address, dropping it when it cannot be stored."""
        if not origin_address:
            return None
        try:
            return OriginAddress(origin_address)
        except PydanticValidationError:
            logfire.warn(
                "Unusable origin address dropped",
                origin_address=origin_address[:MAX_ADDRESS_LENGTH * 2],
            )
            return None

    async def _decide(self, event: LoginEvent) -> Decision:
        """Apply the binding policy against the store."""
        binding = await self.binding_repository.find_by_name(event.name)

        if binding is None:
            return await self._record(event, claimed=True)

        if binding.identity_key != event.identity_key:
            logfire.warn(
                "Name bound to a different identity",
                name=event.name.root,
                identity_key=event.identity_key.root,
                bound_identity_key=binding.identity_key.root,
            )
            return Deny(bound_identity_key=binding.identity_key.root)

        if event.address is not None:
            touched = await self.binding_repository.touch_last_seen(
                event.identity_key, event.address
            )
            if touched:
                return Allow(claimed=False)
            # Row vanished between lookup and write; record it again
            logfire.warn(
                "Binding disappeared before update - re-recording",
                name=event.name.root,
                identity_key=event.identity_key.root,
            )

        return await self._record(event, claimed=False)

    async def _record(self, event: LoginEvent, claimed: bool) -> Decision:
        """Upsert the event's binding, re-checking the name on conflict.

        The upsert is keyed by identity key, so an identity switching to a
        free name keeps its row and releases its previous name.

        Args:
            event: Login event being accepted
            claimed: Whether the name was free at lookup time
        """
        try:
            await self.binding_repository.upsert(
                event.identity_key, event.name, event.address
            )
        except StoreViolationError as e:
            logfire.warn(
                "Concurrent claim detected - re-checking binding",
                name=event.name.root,
                identity_key=event.identity_key.root,
                error=str(e),
            )
            current = await self.binding_repository.find_by_name(event.name)
            if current is not None and current.identity_key == event.identity_key:
                return Allow(claimed=False)
            return Deny(
                bound_identity_key=current.identity_key.root if current else None
            )

        if claimed:
            logfire.info(
                "Name claimed",
                name=event.name.root,
                identity_key=event.identity_key.root,
            )
        return Allow(claimed=claimed)
