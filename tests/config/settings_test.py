import pytest

from regtag.config.settings import Config
from regtag.errors import ConfigError


def test_defaults() -> None:
    config = Config(environ={})
    config.validate()
    assert config.log_level == "WARNING"
    assert config.docker_config is None
    assert config.progress is True


def test_file_config(tmp_path) -> None:
    path = tmp_path / "regtag.yaml"
    path.write_text("log_level: debug\ndocker_config: /etc/regtag/config.json\nprogress: false\n")

    config = Config(environ={"REGTAG_CONFIG": str(path)})
    assert config.log_level == "DEBUG"
    assert config.docker_config == "/etc/regtag/config.json"
    assert config.progress is False


def test_environment_overrides_file(tmp_path) -> None:
    path = tmp_path / "regtag.yaml"
    path.write_text("log_level: DEBUG\ndocker_config: /from/file.json\n")

    config = Config(environ={
        "REGTAG_CONFIG": str(path),
        "REGTAG_LOG_LEVEL": "error",
        "REGTAG_DOCKER_CONFIG": "/from/env.json",
    })
    assert config.log_level == "ERROR"
    assert config.docker_config == "/from/env.json"


def test_missing_file(tmp_path) -> None:
    config = Config(environ={"REGTAG_CONFIG": str(tmp_path / "missing.yaml")})
    with pytest.raises(ConfigError, match="not found"):
        config.validate()


@pytest.mark.parametrize(
    "content",
    [
        "- a\n- b\n",
        "log_level: [unclosed\n",
        "log_level: LOUD\n",
        "progress: \"false\"\n",
        "progress: \"no\"\n",
        "progress: 0\n",
    ],
)
def test_invalid_file(tmp_path, content: str) -> None:
    path = tmp_path / "regtag.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        Config(environ={"REGTAG_CONFIG": str(path)}).validate()


@pytest.mark.parametrize("content, expected", [("progress: no\n", False), ("progress: true\n", True), ("{}\n", True)])
def test_progress_setting(tmp_path, content: str, expected: bool) -> None:
    path = tmp_path / "regtag.yaml"
    path.write_text(content)
    assert Config(environ={"REGTAG_CONFIG": str(path)}).progress is expected
