"""Helpers for working with paths and directories."""

from __future__ import annotations

import logging
import os
import shutil
import time
from functools import lru_cache
from pathlib import Path
from typing import Callable, Iterable, Union

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)

_REMOVE_RETRIES = 3
_RETRY_DELAY = 1.0


@lru_cache(maxsize=None)
def home() -> Path:
    """The home directory of the current user."""
    try:
        return Path.home()
    except RuntimeError as err:
        raise RuntimeError("Failed to get home directory") from err


def expand_tilde(path: PathLike) -> Path:
    """Replace a leading ``~`` component with the home directory."""
    path = Path(path)
    if path.parts and path.parts[0] == "~":
        return home().joinpath(*path.parts[1:])
    return path


def ensure(path: PathLike) -> Path:
    """Create the directory and its parents if it does not exist; return it."""
    path = Path(path)
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_clean(path: PathLike) -> Path:
    """Make the directory exist and be empty; return it.

    An existing directory is removed with everything in it and created again.
    Removal is retried a few times before the error is raised.
    """
    path = Path(path)
    if path.exists():
        for attempt in range(1, _REMOVE_RETRIES + 2):
            try:
                shutil.rmtree(path)
                break
            except OSError as err:
                if attempt > _REMOVE_RETRIES:
                    raise
                _log.warning(
                    "Failed to remove dir %s due to %s, retry %d times", path, err, attempt
                )
                time.sleep(_RETRY_DELAY)
    else:
        ensure(path.parent)
    path.mkdir()
    return path


def global_path(base_dirs: Iterable[PathLike], path: PathLike) -> list[Path]:
    """Join ``path`` to every base directory and keep the results that exist."""
    candidates = (Path(base) / path for base in base_dirs)
    return [candidate for candidate in candidates if candidate.exists()]


def global_find(
    base_dirs: Iterable[PathLike], finder: Callable[[Path], Path | None]
) -> list[Path]:
    """Call ``finder`` on every base directory and keep the paths it returns."""
    found = (finder(Path(base)) for base in base_dirs)
    return [path for path in found if path is not None]


def ensure_name(name: str) -> str:
    """Return ``name`` unchanged, raising ValueError if it holds a path separator."""
    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in name for sep in separators):
        raise ValueError("The given name should not contain path separator")
    return name