from __future__ import annotations

from src.domain.entities.errors import (
    DeviceUnreachableError,
    DomainError,
    NoStagedCommandError,
    UnknownCommandTypeError,
)


def test_domain_error_keeps_message_and_details() -> None:
    error = DomainError("boom", {"key": "value"})
    assert str(error) == "boom"
    assert error.message == "boom"
    assert error.details == {"key": "value"}


def test_domain_error_defaults_details() -> None:
    assert DomainError("boom").details == {}


def test_specific_errors_are_domain_errors() -> None:
    assert isinstance(NoStagedCommandError(), DomainError)
    assert "stage()" in NoStagedCommandError().message

    unknown = UnknownCommandTypeError("DIM")
    assert isinstance(unknown, DomainError)
    assert unknown.message == "Unknown command type: DIM"

    unreachable = DeviceUnreachableError("porch-light", {"attempt": 1})
    assert unreachable.message == "Device porch-light is unreachable"
    assert unreachable.details == {"attempt": 1}
