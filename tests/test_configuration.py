from __future__ import annotations

from pathlib import Path

import pytest

from wordnik_api import Configuration, ConfigurationError


def test_defaults() -> None:
    config = Configuration(api_key="abc")
    assert config.api_host == "api.wordnik.com"
    assert config.api_port == 443
    assert config.api_version == "v4"
    assert config.api_url == "https://api.wordnik.com"


@pytest.mark.parametrize(
    ("port", "url"),
    [(443, "https://example.test"), (80, "http://example.test"), (8443, "https://example.test:8443")],
)
def test_api_url(port: int, url: str) -> None:
    assert Configuration(api_key="abc", api_host="example.test", api_port=port).api_url == url


def test_missing_key_is_fatal() -> None:
    with pytest.raises(ConfigurationError, match="WORDNIK_API_KEY"):
        Configuration(api_key="")


def test_repr_masks_api_key() -> None:
    text = repr(Configuration(api_key="secret-key"))
    assert "secret-key" not in text
    assert text == "<Configuration api_key: *****, api_host: api.wordnik.com:443, api_version: v4>"


def test_load_from_environment(tmp_path: Path) -> None:
    config = Configuration.load(
        search_paths=[tmp_path / ".wordnik.yml"],
        environ={"WORDNIK_API_KEY": "env-key"},
    )
    assert config.api_key == "env-key"
    assert config.api_host == "api.wordnik.com"


def test_load_from_first_existing_file(tmp_path: Path) -> None:
    local = tmp_path / "local" / ".wordnik.yml"
    home = tmp_path / "home" / ".wordnik.yml"
    home.parent.mkdir()
    home.write_text("api_key: home-key\n", encoding="utf-8")

    config = Configuration.load(search_paths=[local, home], environ={})
    assert config.api_key == "home-key"


def test_file_values_override_environment_and_defaults(tmp_path: Path) -> None:
    path = tmp_path / ".wordnik.yml"
    path.write_text(
        "api_key: file-key\napi_host: staging.wordnik.test\napi_port: 8443\napi_version: v5\n",
        encoding="utf-8",
    )

    config = Configuration.load(search_paths=[path], environ={"WORDNIK_API_KEY": "env-key"})
    assert config.api_key == "file-key"
    assert config.api_host == "staging.wordnik.test"
    assert config.api_port == 8443
    assert config.api_version == "v5"


def test_file_without_key_falls_back_to_environment(tmp_path: Path) -> None:
    path = tmp_path / ".wordnik.yml"
    path.write_text("api_version: v4\n", encoding="utf-8")

    config = Configuration.load(search_paths=[path], environ={"WORDNIK_API_KEY": "env-key"})
    assert config.api_key == "env-key"


def test_no_key_anywhere_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        Configuration.load(search_paths=[tmp_path / ".wordnik.yml"], environ={})


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / ".wordnik.yml"
    path.write_text("api_key: [unterminated\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        Configuration.load(search_paths=[path], environ={"WORDNIK_API_KEY": "env-key"})


def test_non_mapping_yaml_is_ignored(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / ".wordnik.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    config = Configuration.load(search_paths=[path], environ={"WORDNIK_API_KEY": "env-key"})
    assert config.api_key == "env-key"
    assert "expected a mapping" in caplog.text
