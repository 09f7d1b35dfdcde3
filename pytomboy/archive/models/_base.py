from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict


def _env_extra_mode(default: str = "ignore") -> str:
    """
    Determine the extra-mode from environment vars.

    PYTOMBOY_EXTRA: allow|forbid|ignore
    Convenience booleans: "true/1/on" -> forbid (strict), "false/0/off" -> allow
    """
    raw = (os.getenv("PYTOMBOY_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw

    if raw in {"1", "true", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "off", "lenient"}:
        return "allow"

    return default


_EXTRA = _env_extra_mode()


class TomboyModel(BaseModel):
    """
    Project-wide base model for archive XML attributes.

    Tomboy writes a few attributes we never read, so the default is
    extra='ignore'. Switch at runtime by setting an env var before import:
      export PYTOMBOY_EXTRA=forbid   # or allow/ignore
    """

    model_config = ConfigDict(
        extra=_EXTRA,  # 'forbid' | 'allow' | 'ignore'
        frozen=True,
        populate_by_name=True,
    )


__all__ = ["TomboyModel"]
