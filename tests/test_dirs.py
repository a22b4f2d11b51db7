import sys
from pathlib import Path

import pytest

from maatools import dirs
from maatools.dirs import Dirs, ProjectDirs
from maatools.pathutil import home

XDG_VARS = ("XDG_DATA_HOME", "XDG_STATE_HOME", "XDG_CACHE_HOME", "XDG_CONFIG_HOME")

PROJECT = ProjectDirs(
    data_dir=Path("/proj/data"),
    config_dir=Path("/proj/config"),
    cache_dir=Path("/proj/cache"),
    state_dir=Path("/proj/state"),
)


@pytest.fixture
def linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    for var in XDG_VARS:
        monkeypatch.delenv(var, raising=False)


def test_detect_linux(linux):
    h = home()
    assert ProjectDirs.detect() == ProjectDirs(
        h / ".local/share/maa", h / ".config/maa", h / ".cache/maa", h / ".local/state/maa"
    )


def test_detect_linux_xdg(linux, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", "/xdg")
    monkeypatch.setenv("XDG_CACHE_HOME", "relative")
    project = ProjectDirs.detect()
    assert project.data_dir == Path("/xdg/maa")
    assert project.cache_dir == home() / ".cache/maa"


def test_detect_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    project = ProjectDirs.detect()
    h = home()
    assert project.data_dir == h / "Library/Application Support/com.loong.maa"
    assert project.config_dir == project.data_dir
    assert project.cache_dir == h / "Library/Caches/com.loong.maa"
    assert project.state_dir is None


def test_detect_windows(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.delenv("LOCALAPPDATA", raising=False)
    project = ProjectDirs.detect()
    h = home()
    assert project.data_dir == h / "AppData/Roaming/loong/maa/data"
    assert project.config_dir == h / "AppData/Roaming/loong/maa/config"
    assert project.cache_dir == h / "AppData/Local/loong/maa/cache"
    assert project.state_dir is None


def test_std_dirs_linux(linux):
    d = Dirs(ProjectDirs.detect(), {})
    h = home()
    assert d.data == h / ".local/share/maa"
    assert d.state == h / ".local/state/maa"
    assert d.cache == h / ".cache/maa"
    assert d.config == h / ".config/maa"
    assert d.library == d.data / "lib"
    assert d.resource == d.data / "resource"
    assert d.hot_update == d.data / "MaaResource"
    assert d.copilot == d.cache / "copilot"
    assert d.log == d.state / "debug"


def test_std_dirs_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    d = Dirs(ProjectDirs.detect(), {})
    h = home()
    assert d.data == h / "Library/Application Support/com.loong.maa"
    assert d.state == d.data
    assert d.cache == h / "Library/Caches/com.loong.maa"
    assert d.config == d.data / "config"


def test_data_dir():
    d = Dirs(PROJECT, {"XDG_DATA_HOME": "/xdg"})
    assert d.data == Path("/xdg/maa")
    assert d.library == Path("/xdg/maa/lib")
    assert d.resource == Path("/xdg/maa/resource")
    assert d.hot_update == Path("/xdg/maa/MaaResource")

    d = Dirs(PROJECT, {"MAA_DATA_DIR": "/maa"})
    assert d.data == Path("/maa")
    assert d.library == Path("/maa/lib")
    assert d.resource == Path("/maa/resource")
    assert d.hot_update == Path("/maa/MaaResource")


def test_maa_var_wins_over_xdg():
    d = Dirs(PROJECT, {"MAA_DATA_DIR": "/maa", "XDG_DATA_HOME": "/xdg"})
    assert d.data == Path("/maa")


def test_state_dir():
    d = Dirs(PROJECT, {"XDG_STATE_HOME": "/xdg"})
    assert d.state == Path("/xdg/maa")
    assert d.log == Path("/xdg/maa/debug")

    d = Dirs(PROJECT, {"MAA_STATE_DIR": "/maa"})
    assert d.state == Path("/maa")
    assert d.log == Path("/maa/debug")


def test_state_falls_back_to_data():
    project = ProjectDirs(Path("/p/data"), Path("/p/config"), Path("/p/cache"))
    assert Dirs(project, {}).state == Path("/p/data")


def test_cache_dir():
    d = Dirs(PROJECT, {"XDG_CACHE_HOME": "/xdg"})
    assert d.cache == Path("/xdg/maa")
    assert d.copilot == Path("/xdg/maa/copilot")

    d = Dirs(PROJECT, {"MAA_CACHE_DIR": "/maa"})
    assert d.cache == Path("/maa")
    assert d.copilot == Path("/maa/copilot")


def test_config_dir(linux):
    assert Dirs(PROJECT, {"XDG_CONFIG_HOME": "/xdg"}).config == Path("/xdg/maa")
    assert Dirs(PROJECT, {"MAA_CONFIG_DIR": "/maa"}).config == Path("/maa")
    assert Dirs(PROJECT, {}).config == Path("/proj/config")


def test_missing_project_raises():
    with pytest.raises(RuntimeError, match="Failed to get data directory!"):
        Dirs(None, {})
    with pytest.raises(RuntimeError, match="Failed to get state directory!"):
        Dirs(None, {"MAA_DATA_DIR": "/maa"})


def test_env_only():
    env = {
        "XDG_DATA_HOME": "/xdg",
        "XDG_CACHE_HOME": "/xdg",
        "XDG_STATE_HOME": "/xdg",
        "XDG_CONFIG_HOME": "/xdg",
    }
    d = Dirs(None, env)
    assert d.data == d.cache == d.state == d.config == Path("/xdg/maa")


def test_abs_config():
    d = Dirs(PROJECT, {"MAA_CONFIG_DIR": "/maa"})
    assert d.abs_config("tasks/daily.toml") == Path("/maa/tasks/daily.toml")
    assert d.abs_config("daily.toml", "tasks") == Path("/maa/tasks/daily.toml")
    assert d.abs_config(Path("/abs/file.toml"), "tasks") is None


def test_module_functions():
    d = dirs.default_dirs()
    assert dirs.default_dirs() is d
    assert dirs.data() == d.data
    assert dirs.library() == dirs.data() / "lib"
    assert dirs.resource() == dirs.data() / "resource"
    assert dirs.hot_update() == dirs.data() / "MaaResource"
    assert dirs.copilot() == dirs.cache() / "copilot"
    assert dirs.log() == dirs.state() / "debug"
    assert dirs.config() == d.config
    assert dirs.abs_config("x.toml") == dirs.config() / "x.toml"