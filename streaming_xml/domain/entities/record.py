from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, TypeAlias

Scalar: TypeAlias = str | int | float | bool | Decimal | datetime | date | time | None
# Scalars, mappings, sequences, or anything else with a text form.
Value: TypeAlias = Any
Record: TypeAlias = Mapping[Any, Value]


class ArrayEncodingPolicy(str, Enum):
    """How list values are laid out in the rendered XML."""

    REPEAT = "repeat"  # <tags>a</tags><tags>b</tags>
    INDEXED_CHILD = "indexed"  # <tags><item_0>a</item_0>...</tags>

    @classmethod
    def from_name(cls, name: str | ArrayEncodingPolicy) -> ArrayEncodingPolicy:
        if isinstance(name, ArrayEncodingPolicy):
            return name
        cleaned = str(name).strip().lower().replace("-", "_")
        for policy in cls:
            if cleaned in (policy.value, policy.name.lower()):
                return policy
        valid = ", ".join(policy.value for policy in cls)
        raise ValueError(f"Unknown array policy {name!r} (expected one of: {valid})")
