"""
Normalization of log entry parameters.

Log parameters arrive in whatever shape the wiki stored them: a mapping with
keys like ``4::target``, a positional list, or occasionally a bare scalar.
``normalize_log_params`` folds them into one of three shapes so callers can
dispatch on the type:

- ScalarParams: a single value
- ListParams: values whose keys were exactly 0..n-1
- MappingParams: anything else with named or sparse keys (may be empty)

Values are always text. Nested lists and dicts become compact JSON.
"""

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

# "4::target" -> "target"
_KEY_PREFIX = re.compile(r"^[0-9]+:+")


@dataclass(frozen=True)
class ScalarParams:
    value: str


@dataclass(frozen=True)
class ListParams:
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class MappingParams:
    entries: dict[str, str] = field(default_factory=dict)


LogParams = Union[ScalarParams, ListParams, MappingParams]


def param_text(val: Any) -> str:
    """Render one parameter value as text."""
    if val is None or val is False:
        return ""
    if val is True:
        return "1"
    if isinstance(val, (dict, list, tuple)):
        return json.dumps(val, separators=(",", ":"), ensure_ascii=False, default=str)
    return str(val)


def normalize_log_params(raw: Any) -> LogParams:
    if raw is None:
        return MappingParams()

    if isinstance(raw, Mapping):
        entries: dict[str, str] = {}
        for key, val in raw.items():
            entries[_KEY_PREFIX.sub("", str(key))] = param_text(val)
        if _is_positional(entries):
            return ListParams(tuple(entries.values()))
        return MappingParams(entries)

    if isinstance(raw, (list, tuple)):
        return ListParams(tuple(param_text(v) for v in raw))

    return ScalarParams(param_text(raw))


def _is_positional(entries: dict[str, str]) -> bool:
    return bool(entries) and list(entries) == [str(i) for i in range(len(entries))]
