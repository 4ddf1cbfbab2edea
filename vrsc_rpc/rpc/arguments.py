"""Argument shaping for positional RPC calls."""
from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..errors import ContractViolation, SerializationError


def into_json(value: Any) -> Any:
    """Convert ``value`` to a JSON-compatible wire value.

    Raises:
        SerializationError: ``value`` has no JSON form, or holds a NaN or
            infinite float, which strict JSON cannot carry.
    """
    wire = _to_wire(value)
    if not _all_finite(wire):
        raise SerializationError(
            f"Cannot serialize {type(value).__name__} argument: "
            "non-finite float (NaN or infinity)"
        )
    return wire


def _to_wire(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [_to_wire(item) for item in value]
    try:
        return to_jsonable_python(value, by_alias=True)
    except PydanticSerializationError as e:
        raise SerializationError(
            f"Cannot serialize {type(value).__name__} argument: {e}"
        ) from e


def _all_finite(wire: Any) -> bool:
    if isinstance(wire, float):
        return math.isfinite(wire)
    if isinstance(wire, dict):
        return all(_all_finite(item) for item in wire.values())
    if isinstance(wire, list):
        return all(_all_finite(item) for item in wire)
    return True


def handle_defaults(args: Sequence[Any], defaults: Sequence[Any]) -> list[Any]:
    """Fill in or trim unset (``None``) optional arguments.

    ``defaults`` lines up with the last ``len(defaults)`` entries of ``args``::

        arg1 arg2 arg3 arg4
                  def1 def2

    An unset optional that sits left of a supplied one is replaced by its
    default. Unset optionals after the last supplied one are dropped, so the
    daemon applies its own defaults. Positions without a default are required
    and are never touched.
    """
    if len(defaults) > len(args):
        raise ContractViolation(
            f"{len(defaults)} defaults given for {len(args)} arguments"
        )

    result = list(args)
    last_supplied: int | None = None
    for offset in range(1, len(defaults) + 1):
        i = len(result) - offset
        if result[i] is None:
            if last_supplied is not None:
                default = defaults[len(defaults) - offset]
                if default is None:
                    raise ContractViolation(f"Missing default for argument {i}")
                result[i] = default
        elif last_supplied is None:
            last_supplied = i

    if last_supplied is not None:
        return result[: last_supplied + 1]
    return result[: len(result) - len(defaults)]
