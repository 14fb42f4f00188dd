"""Root logger setup driven by the persisted ``debug_logging`` toggle.

``AGRITRACK_LOG_LEVEL`` (a level name such as ``WARNING`` or a number) and
``AGRITRACK_DEBUG`` win over the toggle, so verbosity can be raised for a
single run without editing ``user_settings.json``.
"""
from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LEVEL_VAR = "AGRITRACK_LOG_LEVEL"
DEBUG_VAR = "AGRITRACK_DEBUG"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_level(text: Optional[str]) -> Optional[int]:
    """Return the numeric level ``text`` names, or None when it names none."""
    text = (text or "").strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else None


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    env = os.environ if environ is None else environ
    level = parse_level(env.get(LEVEL_VAR))
    if level is not None:
        return level
    if (env.get(DEBUG_VAR) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def effective_level(debug_enabled: bool, environ: Optional[Mapping[str, str]] = None) -> int:
    level = env_level(environ)
    if level is not None:
        return level
    return logging.DEBUG if debug_enabled else logging.INFO


def configure_root(debug_enabled: bool = False) -> int:
    """Install the compact console handler once and set the root level."""
    level = effective_level(debug_enabled)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(level)
    return level


def apply_gui_preferences(debug_enabled: bool) -> int:
    """Re-apply the root level once settings have been loaded."""
    level = effective_level(debug_enabled)
    logging.getLogger().setLevel(level)
    return level


def env_requests_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    level = env_level(environ)
    return level is not None and level <= logging.DEBUG
