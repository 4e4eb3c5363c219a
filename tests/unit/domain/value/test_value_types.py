"""Unit tests for name binding value objects."""

import pytest
from pydantic import TypeAdapter, ValidationError

from nameguard.domain.model import Allow, Decision, Deny, Unresolved
from nameguard.domain.value import DecisionKind, IdentityKey, OriginAddress, PlayerName


class TestPlayerName:
    """Tests for PlayerName."""

    def test_accepts_platform_length_name(self):
        assert PlayerName("A" * 16).root == "A" * 16

    @pytest.mark.parametrize("value", ["", "A" * 17, " Alice", "Alice "])
    def test_rejects_invalid_names(self, value):
        with pytest.raises(ValidationError):
            PlayerName(value)

    def test_names_compare_by_value(self):
        assert PlayerName("Alice") == PlayerName("Alice")
        assert PlayerName("Alice") != PlayerName("alice")


class TestIdentityKey:
    """Tests for IdentityKey."""

    def test_uuid_is_canonicalised(self):
        """Uppercase and unhyphenated UUIDs map to the canonical form."""
        canonical = "0f8fad5b-d9cb-469f-a165-70867728950e"

        assert IdentityKey(canonical.upper()).root == canonical
        assert IdentityKey(canonical.replace("-", "")).root == canonical

    def test_opaque_key_is_kept_verbatim(self):
        assert IdentityKey("uuid-1").root == "uuid-1"

    @pytest.mark.parametrize("value", ["", "   ", "k" * 37])
    def test_rejects_invalid_keys(self, value):
        with pytest.raises(ValidationError):
            IdentityKey(value)


class TestOriginAddress:
    """Tests for OriginAddress."""

    def test_accepts_ipv6(self):
        address = "2001:db8::ff00:42:8329"
        assert OriginAddress(address).root == address

    def test_rejects_oversized_address(self):
        with pytest.raises(ValidationError):
            OriginAddress("1" * 46)


class TestDecision:
    """Tests for the Decision tagged union."""

    @pytest.mark.parametrize(
        "payload,expected",
        [
            ({"kind": "allow", "claimed": True}, Allow),
            ({"kind": "deny", "reason": "taken"}, Deny),
            (
                {"kind": "unresolved", "error": "down", "error_type": "store_unavailable"},
                Unresolved,
            ),
        ],
    )
    def test_kind_selects_variant(self, payload, expected):
        decision = TypeAdapter(Decision).validate_python(payload)

        assert isinstance(decision, expected)

    def test_serialises_kind_as_string(self):
        assert Deny().model_dump(mode="json")["kind"] == "deny"
        assert Allow().kind == DecisionKind.ALLOW
