from __future__ import annotations

import os


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def env_float(name: str, default: float) -> float:
    """Float from the environment; unset or blank falls back to ``default``."""

    raw = (os.getenv(name) or "").strip()
    return float(raw) if raw else default
