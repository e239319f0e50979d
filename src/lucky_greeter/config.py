"""Startup configuration: feature resolution and optional ``.env`` loading.

Purpose
-------
Resolve the two output toggles exactly once per process. The build-time table
in :data:`lucky_greeter.__init__conf__.FEATURES` supplies the defaults; the
environment (optionally seeded from a ``.env`` file) may override them before
the greet use case runs.

Contents
--------
* :func:`resolve_features` - build defaults plus environment overrides.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``.env`` handling shared
  by the CLI and host applications.
* ``PRINT_42_ENV_VAR`` / ``LUCKY_NUMBER_ENV_VAR`` / ``DOTENV_ENV_VAR`` -
  recognised environment variables.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from . import __init__conf__
from .domain.features import LUCKY_NUMBER, PRINT_42, FeatureFlags

logger = logging.getLogger(__name__)

PRINT_42_ENV_VAR = "LUCKY_GREETER_PRINT_42"
LUCKY_NUMBER_ENV_VAR = "LUCKY_GREETER_LUCKY_NUMBER"
DOTENV_ENV_VAR = "LUCKY_GREETER_USE_DOTENV"

_FEATURE_ENV_VARS: Mapping[str, str] = {
    PRINT_42: PRINT_42_ENV_VAR,
    LUCKY_NUMBER: LUCKY_NUMBER_ENV_VAR,
}
_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOADED = False
_DOTENV_PATH: Path | None = None


def parse_bool(value: str | None, default: bool) -> bool:
    """Interpret ``1/true/yes/on`` strings; unset or blank keeps ``default``.

    Examples
    --------
    >>> parse_bool(None, default=True)
    True
    >>> parse_bool(" On ", default=False)
    True
    >>> parse_bool("0", default=True)
    False
    >>> parse_bool("", default=True)
    True
    """

    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def resolve_features(
    environ: Mapping[str, str] | None = None,
    *,
    defaults: Mapping[str, bool] | None = None,
) -> FeatureFlags:
    """Return the feature flags for this process.

    Parameters
    ----------
    environ:
        Mapping consulted for overrides; defaults to :data:`os.environ`.
    defaults:
        Build-time feature table; defaults to
        :data:`lucky_greeter.__init__conf__.FEATURES`.

    Examples
    --------
    >>> resolve_features({}, defaults={"print-42": False, "lucky-number": False})
    FeatureFlags(print_alt=False, enable_random=False)
    >>> resolve_features({"LUCKY_GREETER_PRINT_42": "1"}, defaults={"print-42": False})
    FeatureFlags(print_alt=True, enable_random=False)
    """

    env = os.environ if environ is None else environ
    table = dict(__init__conf__.FEATURES if defaults is None else defaults)
    for feature, env_var in _FEATURE_ENV_VARS.items():
        table[feature] = parse_bool(env.get(env_var), default=bool(table.get(feature, False)))
    flags = FeatureFlags.from_mapping(table)
    logger.debug("resolved features %s", flags.to_mapping())
    return flags


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI choice beats the environment.

    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    """

    if explicit is not None:
        return explicit
    return parse_bool(env_value, default=False)


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding variables that are already set.

    The search walks upwards from ``search_from`` (default: the current working
    directory). The result is memoised, so repeated calls are cheap and never
    re-read the file.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _DOTENV_LOADED, _DOTENV_PATH
    if _DOTENV_LOADED:
        return _DOTENV_PATH

    candidate = _find_dotenv(search_from)
    if candidate is not None:
        load_dotenv(candidate, override=False)
        logger.debug("loaded environment from %s", candidate)
    _DOTENV_PATH = candidate
    _DOTENV_LOADED = True
    return candidate


def _find_dotenv(search_from: Path | None) -> Path | None:
    if search_from is None:
        found = find_dotenv(usecwd=True)
        return Path(found).resolve() if found else None
    start = search_from.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate.resolve()
    return None


def _reset_dotenv_state_for_testing() -> None:
    """Forget which ``.env`` was loaded so tests start from a clean slate."""

    global _DOTENV_LOADED, _DOTENV_PATH
    _DOTENV_LOADED = False
    _DOTENV_PATH = None


__all__ = [
    "DOTENV_ENV_VAR",
    "LUCKY_NUMBER_ENV_VAR",
    "PRINT_42_ENV_VAR",
    "enable_dotenv",
    "parse_bool",
    "resolve_features",
    "should_use_dotenv",
]
