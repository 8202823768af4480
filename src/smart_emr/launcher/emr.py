"""EMR vendor identifiers."""

from __future__ import annotations

from enum import Enum

from ..errors import InvalidEMRTypeError


class EMR(str, Enum):
    """EMR vendors a launch can come from."""

    EPIC = "EPIC"
    CERNER = "CERNER"
    SMART = "SMART"
    NONE = "NONE"


def instance_of_emr(obj: object) -> bool:
    """Return True if obj is an EMR member or a string naming one."""
    if isinstance(obj, EMR):
        return True
    return isinstance(obj, str) and obj.upper() in EMR.__members__


def to_emr(value: object) -> EMR:
    """Coerce an EMR or its (case-insensitive) name to an EMR member."""
    if not instance_of_emr(value):
        raise InvalidEMRTypeError(value)
    if isinstance(value, EMR):
        return value
    return EMR[value.upper()]  # type: ignore[union-attr]
