from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict

_TRUE_VALUES = {"", "true", "1", "yes"}
_FALSE_VALUES = {"false", "0", "no"}


def _parse_parameter_string(parameter: str) -> Dict[str, str]:
    values: Dict[str, str] = {}
    if not parameter:
        return values
    for chunk in parameter.split(","):
        if not chunk.strip():
            continue
        key, _, value = chunk.partition("=")
        key = key.strip()
        if not key:
            continue
        values[key] = value.strip()
    return values


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value '{value}' for option '{key}'")


@dataclass(frozen=True)
class GeneratorOptions:
    """Options recognised by both dialects.

    ``embed_enums`` only affects the Flow dialect.
    """

    always_qualify_type_names: bool = False
    embed_enums: bool = False

    @classmethod
    def from_parameter(cls, parameter: str) -> "GeneratorOptions":
        """Parse a protoc plugin parameter such as ``embed_enums,always_qualify_type_names=false``."""
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, bool] = {}
        for key, value in _parse_parameter_string(parameter).items():
            if key not in known:
                raise ValueError(
                    f"Unknown option '{key}'. Supported options: {sorted(known)}"
                )
            kwargs[key] = _parse_bool(key, value)
        return cls(**kwargs)
