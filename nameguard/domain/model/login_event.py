"""Login event emitted by the host for every joining player."""

from typing import Optional

from nameguard.domain.model.common import DomainModel
from nameguard.domain.value import IdentityKey, OriginAddress, PlayerName


class LoginEvent(DomainModel):
    """A validated login attempt.

    origin_address is None when the host does not report one or when
    address tracking is disabled.
    """

    name: PlayerName
    identity_key: IdentityKey
    origin_address: Optional[OriginAddress] = None

    @property
    def address(self) -> Optional[str]:
        """Origin address as a plain string, if any."""
        return self.origin_address.root if self.origin_address else None
