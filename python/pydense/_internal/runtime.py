from __future__ import annotations

import os
import warnings
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Any, Iterator, Mapping

from .warnings import PyDenseConfigWarning


ENV_MATMUL_WARN_OPS = "PYDENSE_MATMUL_WARN_OPS"
ENV_EDGE_ITEMS = "PYDENSE_EDGE_ITEMS"

_DEFAULT_MATMUL_WARN_OPS = 1_000_000
_DEFAULT_EDGE_ITEMS = 4

_WARNED_ENV_KEYS: set[tuple[str, str]] = set()


@dataclass(frozen=True)
class Settings:
    """Process-wide knobs.

    matmul_warn_ops: multiply-add count above which `multiply` emits a
        performance warning. None (or a non-positive env value) disables it.
    edge_items: rows/columns printed at each edge by `str(matrix)`.
    """

    matmul_warn_ops: int | None = _DEFAULT_MATMUL_WARN_OPS
    edge_items: int = _DEFAULT_EDGE_ITEMS


def _warn_env_once(name: str, raw: str, message: str, *, stacklevel: int) -> None:
    key = (name, raw)
    if key in _WARNED_ENV_KEYS:
        return
    _WARNED_ENV_KEYS.add(key)
    warnings.warn(message, PyDenseConfigWarning, stacklevel=stacklevel)


def _env_int(environ: Mapping[str, str], name: str, default: int, *, stacklevel: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        _warn_env_once(
            name,
            raw,
            f"{name}={raw!r} is not an integer; using {default}",
            stacklevel=stacklevel + 1,
        )
        return default


def load_settings(environ: Mapping[str, str] | None = None, *, stacklevel: int = 1) -> Settings:
    """Read settings from `environ` (default: os.environ).

    `stacklevel` names the frame, counted from the caller of this function,
    that config warnings are attributed to.
    """
    env = os.environ if environ is None else environ

    ops = _env_int(env, ENV_MATMUL_WARN_OPS, _DEFAULT_MATMUL_WARN_OPS, stacklevel=stacklevel + 2)
    matmul_warn_ops: int | None = ops if ops > 0 else None

    edge_items = _env_int(env, ENV_EDGE_ITEMS, _DEFAULT_EDGE_ITEMS, stacklevel=stacklevel + 2)
    if edge_items < 1:
        _warn_env_once(
            ENV_EDGE_ITEMS,
            str(edge_items),
            f"{ENV_EDGE_ITEMS}={edge_items} must be >= 1; using {_DEFAULT_EDGE_ITEMS}",
            stacklevel=stacklevel + 2,
        )
        edge_items = _DEFAULT_EDGE_ITEMS

    return Settings(matmul_warn_ops=matmul_warn_ops, edge_items=edge_items)


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings(stacklevel=2)
    return _settings


def reload_settings() -> Settings:
    """Drop any in-code overrides and re-read the environment."""
    global _settings
    _settings = load_settings(stacklevel=2)
    return _settings


def _validated(base: Settings, changes: dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(unknown)}")

    if "matmul_warn_ops" in changes:
        ops = changes["matmul_warn_ops"]
        if ops is not None:
            if isinstance(ops, bool) or not isinstance(ops, int):
                raise TypeError("matmul_warn_ops must be an int or None")
            if ops <= 0:
                raise ValueError("matmul_warn_ops must be positive (use None to disable)")

    if "edge_items" in changes:
        edge = changes["edge_items"]
        if isinstance(edge, bool) or not isinstance(edge, int):
            raise TypeError("edge_items must be an int")
        if edge < 1:
            raise ValueError("edge_items must be >= 1")

    return replace(base, **changes)


def configure(**changes: Any) -> Settings:
    global _settings
    _settings = _validated(get_settings(), changes)
    return _settings


@contextmanager
def settings_override(**changes: Any) -> Iterator[Settings]:
    """Temporarily override settings for the duration of a `with` block.

    The previous settings are restored on exit, including when the block
    raises. Not intended to provide thread isolation.
    """
    global _settings
    prev = get_settings()
    _settings = _validated(prev, changes)
    try:
        yield _settings
    finally:
        _settings = prev
