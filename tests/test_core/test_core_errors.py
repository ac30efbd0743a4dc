from __future__ import annotations

import pytest

from typesafe_enum.core.enums import DuplicatePolicy, RegistrationOutcome
from typesafe_enum.core.errors import (
    AccessViolationError,
    ConfigurationError,
    DuplicateKeyError,
    EnumDefinitionError,
    EnumError,
    ImmutableMemberError,
    InvalidKeyNameError,
    InvalidKeyTypeError,
    MemberNotFoundError,
)


@pytest.mark.parametrize(
    ("error", "builtin"),
    [
        (InvalidKeyTypeError, TypeError),
        (InvalidKeyNameError, ValueError),
        (DuplicateKeyError, ValueError),
        (AccessViolationError, TypeError),
        (EnumDefinitionError, TypeError),
        (ImmutableMemberError, AttributeError),
        (MemberNotFoundError, KeyError),
        (ConfigurationError, ValueError),
    ],
)
def test_errors_should_share_base_and_builtin(error: type, builtin: type) -> None:
    assert issubclass(error, EnumError)
    assert issubclass(error, builtin)


def test_core_enums_should_parse_from_values() -> None:
    assert DuplicatePolicy("ignore") is DuplicatePolicy.IGNORE
    assert RegistrationOutcome("inserted") is RegistrationOutcome.INSERTED
