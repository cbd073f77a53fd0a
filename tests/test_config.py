import os

from minish.config import WINDOWS_SUFFIXES, ShellConfig, default_suffixes


def test_defaults_for_empty_environment():
    config = ShellConfig.from_env({}, platform="linux")
    assert config.search_path == ()
    assert config.suffixes == ("",)
    assert config.log_level == "WARNING"


def test_windows_default_suffixes():
    assert default_suffixes("win32") == WINDOWS_SUFFIXES
    config = ShellConfig.from_env({}, platform="win32")
    assert config.suffixes == (".EXE", ".BAT", ".CMD")


def test_reads_path_and_pathext():
    env = {
        "PATH": os.pathsep.join(["/usr/bin", "/bin"]),
        "PATHEXT": ".EXE;.BAT",
        "MINISH_LOG_LEVEL": "debug",
    }
    config = ShellConfig.from_env(env, platform="linux")
    assert config.search_path == ("/usr/bin", "/bin")
    assert config.suffixes == (".EXE", ".BAT")
    assert config.log_level == "DEBUG"


def test_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("PATH", "/only/here")
    monkeypatch.setenv("PATHEXT", ".CMD")
    config = ShellConfig.from_env()
    assert config.search_path == ("/only/here",)
    assert config.suffixes == (".CMD",)
