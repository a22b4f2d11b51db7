"""Standard directories used for data, configuration, cache and state."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Callable, Mapping, Union

from maatools.pathutil import home

PathLike = Union[str, "os.PathLike[str]"]

QUALIFIER = "com"
ORGANIZATION = "loong"
APPLICATION = "maa"


def _xdg_base(env: Mapping[str, str], var: str, fallback: Path) -> Path:
    value = env.get(var)
    if value and Path(value).is_absolute():
        return Path(value)
    return fallback


@dataclass(frozen=True)
class ProjectDirs:
    """The platform's conventional directories for this application."""

    data_dir: Path
    config_dir: Path
    cache_dir: Path
    state_dir: Path | None = None

    @classmethod
    def detect(cls) -> ProjectDirs | None:
        """Directories for the running platform, or None without a home directory."""
        try:
            home_dir = home()
        except RuntimeError:
            return None
        return cls._for_platform(sys.platform, home_dir, os.environ)

    @classmethod
    def _for_platform(
        cls, platform: str, home_dir: Path, env: Mapping[str, str]
    ) -> ProjectDirs:
        if platform == "darwin":
            name = f"{QUALIFIER}.{ORGANIZATION}.{APPLICATION}"
            support = home_dir / "Library" / "Application Support" / name
            return cls(support, support, home_dir / "Library" / "Caches" / name)
        if platform.startswith("win"):
            roaming = Path(env.get("APPDATA") or home_dir / "AppData" / "Roaming")
            local = Path(env.get("LOCALAPPDATA") or home_dir / "AppData" / "Local")
            roaming = roaming / ORGANIZATION / APPLICATION
            local = local / ORGANIZATION / APPLICATION
            return cls(roaming / "data", roaming / "config", local / "cache")
        return cls(
            _xdg_base(env, "XDG_DATA_HOME", home_dir / ".local" / "share") / APPLICATION,
            _xdg_base(env, "XDG_CONFIG_HOME", home_dir / ".config") / APPLICATION,
            _xdg_base(env, "XDG_CACHE_HOME", home_dir / ".cache") / APPLICATION,
            _xdg_base(env, "XDG_STATE_HOME", home_dir / ".local" / "state") / APPLICATION,
        )


def _dir_from_env(env: Mapping[str, str], maa_var: str, xdg_var: str) -> Path | None:
    value = env.get(maa_var)
    if value is not None:
        return Path(value)
    value = env.get(xdg_var)
    if value is not None:
        return Path(value) / APPLICATION
    return None


def _resolve(
    env: Mapping[str, str],
    maa_var: str,
    xdg_var: str,
    project: ProjectDirs | None,
    fallback: Callable[[ProjectDirs], Path],
    what: str,
) -> Path:
    found = _dir_from_env(env, maa_var, xdg_var)
    if found is not None:
        return found
    if project is None:
        raise RuntimeError(f"Failed to get {what} directory!")
    return fallback(project)


def _config_fallback(project: ProjectDirs) -> Path:
    if sys.platform == "darwin":
        return project.config_dir / "config"
    return project.config_dir


class Dirs:
    """All directories of the application.

    ``MAA_*_DIR`` variables win over ``XDG_*_HOME`` ones (which get ``maa``
    appended); without either the platform's project directories are used.
    """

    def __init__(
        self, project: ProjectDirs | None = None, env: Mapping[str, str] | None = None
    ) -> None:
        env = os.environ if env is None else env
        self.data = _resolve(
            env, "MAA_DATA_DIR", "XDG_DATA_HOME", project, lambda p: p.data_dir, "data"
        )
        self.state = _resolve(
            env,
            "MAA_STATE_DIR",
            "XDG_STATE_HOME",
            project,
            lambda p: p.state_dir if p.state_dir is not None else p.data_dir,
            "state",
        )
        self.cache = _resolve(
            env, "MAA_CACHE_DIR", "XDG_CACHE_HOME", project, lambda p: p.cache_dir, "cache"
        )
        self.config = _resolve(
            env, "MAA_CONFIG_DIR", "XDG_CONFIG_HOME", project, _config_fallback, "config"
        )
        self.library = self.data / "lib"
        self.resource = self.data / "resource"
        self.hot_update = self.data / "MaaResource"
        self.copilot = self.cache / "copilot"
        self.log = self.state / "debug"

    def __repr__(self) -> str:
        return (
            f"Dirs(data={self.data!r}, config={self.config!r}, "
            f"cache={self.cache!r}, state={self.state!r})"
        )

    def abs_config(self, path: PathLike, sub_dir: PathLike | None = None) -> Path | None:
        """The path inside the config directory, or None if ``path`` is absolute."""
        path = Path(path)
        if path.is_absolute():
            return None
        result = self.config
        if sub_dir is not None:
            result = result / sub_dir
        return result / path


@lru_cache(maxsize=None)
def default_dirs() -> Dirs:
    """The directories for the current environment, computed once."""
    return Dirs(ProjectDirs.detect(), os.environ)


def data() -> Path:
    return default_dirs().data


def library() -> Path:
    return default_dirs().library


def config() -> Path:
    return default_dirs().config


def abs_config(path: PathLike, sub_dir: PathLike | None = None) -> Path | None:
    return default_dirs().abs_config(path, sub_dir)


def cache() -> Path:
    return default_dirs().cache


def copilot() -> Path:
    return default_dirs().copilot


def resource() -> Path:
    return default_dirs().resource


def hot_update() -> Path:
    return default_dirs().hot_update


def state() -> Path:
    return default_dirs().state


def log() -> Path:
    return default_dirs().log