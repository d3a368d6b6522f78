"""Tests for domain enums."""

from fieldrules.domain.types import EmailValidation


def test_email_validation_members() -> None:
    assert {e.value for e in EmailValidation} == {"rfc", "strict", "dns", "spoof", "filter"}
    for member in EmailValidation:
        assert member == member.value
        assert isinstance(member, str)
