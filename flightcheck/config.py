"""
Runtime settings for manifest processing.

Environment variables:

* FLIGHTCHECK_STRICT_GRAMMAR anchors instruction patterns to the whole line.
* FLIGHTCHECK_REQUIRE_DEFINITIONS reports a manifest without a route or aircraft.
* FLIGHTCHECK_ENCODING sets the text encoding for the input and output files.
"""
from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, replace
from typing import Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw_value = os.environ.get(name)
    if raw_value is None:
        return default
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    # Blank or unrecognised values keep the default.
    return default


def _env_encoding(name: str, default: str) -> str:
    raw_value = (os.environ.get(name) or "").strip()
    if not raw_value:
        return default
    try:
        codecs.lookup(raw_value)
    except LookupError:
        return default
    return raw_value


@dataclass(frozen=True)
class Settings:
    strict_grammar: bool = False
    require_definitions: bool = True
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            strict_grammar=_env_flag("FLIGHTCHECK_STRICT_GRAMMAR", cls.strict_grammar),
            require_definitions=_env_flag("FLIGHTCHECK_REQUIRE_DEFINITIONS", cls.require_definitions),
            encoding=_env_encoding("FLIGHTCHECK_ENCODING", cls.encoding),
        )

    def override(self, strict_grammar: Optional[bool] = None, require_definitions: Optional[bool] = None) -> "Settings":
        """Apply command-line overrides; None leaves a value as configured."""
        changes = {}
        if strict_grammar is not None:
            changes["strict_grammar"] = strict_grammar
        if require_definitions is not None:
            changes["require_definitions"] = require_definitions
        return replace(self, **changes)
