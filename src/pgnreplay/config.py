"""Replay options and their environment overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from pgnreplay.core.enums import AmbiguityPolicy

AMBIGUITY_ENV_VAR = "PGNREPLAY_AMBIGUITY"

_POLICY_NAMES: dict[str, AmbiguityPolicy] = {
    "first-match": AmbiguityPolicy.FIRST_MATCH,
    "strict": AmbiguityPolicy.STRICT,
}


def parse_ambiguity_policy(name: str) -> AmbiguityPolicy:
    """Map ``first-match`` / ``strict`` (case-insensitive) to a policy."""
    try:
        return _POLICY_NAMES[name.strip().lower()]
    except KeyError:
        choices = ", ".join(_POLICY_NAMES)
        raise ValueError(
            f"Unknown ambiguity policy {name!r} (expected one of: {choices})"
        ) from None


@dataclass(frozen=True, slots=True)
class ReplayOptions:
    """Knobs for a replay run."""

    ambiguity: AmbiguityPolicy = AmbiguityPolicy.FIRST_MATCH

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ReplayOptions:
        env = os.environ if environ is None else environ
        raw = env.get(AMBIGUITY_ENV_VAR)
        if not raw:
            return cls()
        return cls(ambiguity=parse_ambiguity_policy(raw))
