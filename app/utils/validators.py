"""
A collection of Pydantic validators
See https://docs.pydantic.dev/latest/concepts/validators/#reuse-validators
"""

from typing import Any


def trailing_spaces_remover(value: Any) -> Any:
    """
    Remove trailing spaces.

    Non string values are returned as is. The validator can thus be used for optional values,
    and as a `before` validator, letting the field constraints reject wrong types.

    Used as a `before` validator, a blank string becomes empty and fails a `min_length=1` constraint.
    This function is intended to be used as a Pydantic validator:
    https://docs.pydantic.dev/latest/concepts/validators/#reuse-validators
    """
    if isinstance(value, str):
        return value.strip()
    return value
