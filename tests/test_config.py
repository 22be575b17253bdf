"""Tests for configuration loading."""
import pytest

from piastrix import ClientConfig, ConfigError, load_client_config
from piastrix.core.environment import build_environment


def test_defaults():
    config = ClientConfig(shop_id=1, secret_key="s")

    assert config.url == "https://core.piastrix.com/"
    assert config.timeout == 10


def test_repr_hides_secret_key():
    config = ClientConfig(shop_id=1, secret_key="very-secret")

    assert "very-secret" not in repr(config)


def test_config_is_immutable():
    config = ClientConfig(shop_id=1, secret_key="s")

    with pytest.raises(AttributeError):
        config.secret_key = "other"


@pytest.mark.parametrize(
    "url, path, expected",
    [
        ("https://core.piastrix.com/", "bill/create", "https://core.piastrix.com/bill/create"),
        ("https://core.piastrix.com", "/bill/create", "https://core.piastrix.com/bill/create"),
    ],
)
def test_endpoint_joins_with_single_slash(url, path, expected):
    assert ClientConfig(shop_id=1, secret_key="s", url=url).endpoint(path) == expected


def test_load_from_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# piastrix\n"
        "PIASTRIX_SHOP_ID=112\n"
        "export PIASTRIX_SECRET_KEY='SecretKey01'\n"
        "PIASTRIX_URL=https://sandbox.example.com/\n"
        "PIASTRIX_TIMEOUT=2.5\n",
        encoding="utf-8",
    )

    config = load_client_config(env_file=str(env_file), base={})

    assert config.shop_id == 112
    assert config.secret_key == "SecretKey01"
    assert config.url == "https://sandbox.example.com/"
    assert config.timeout == 2.5


def test_environment_beats_env_file_and_overrides_beat_both(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PIASTRIX_SHOP_ID=1\nPIASTRIX_SECRET_KEY=file\n", encoding="utf-8")

    config = load_client_config(
        env_file=str(env_file),
        base={"PIASTRIX_SHOP_ID": "2"},
        overrides={"PIASTRIX_SECRET_KEY": "override"},
    )

    assert config.shop_id == 2
    assert config.secret_key == "override"


def test_keyword_arguments_win(monkeypatch):
    monkeypatch.setenv("PIASTRIX_SHOP_ID", "1")
    monkeypatch.setenv("PIASTRIX_SECRET_KEY", "env")

    config = load_client_config(env_file=None, shop_id=5, timeout=30)

    assert config.shop_id == 5
    assert config.secret_key == "env"
    assert config.timeout == 30


def test_missing_file_is_ignored(tmp_path):
    config = load_client_config(
        env_file=str(tmp_path / "missing.env"),
        base={"PIASTRIX_SHOP_ID": "3", "PIASTRIX_SECRET_KEY": "k"},
    )

    assert config.shop_id == 3


@pytest.mark.parametrize(
    "values, message",
    [
        ({"PIASTRIX_SECRET_KEY": "k"}, "PIASTRIX_SHOP_ID"),
        ({"PIASTRIX_SHOP_ID": "abc", "PIASTRIX_SECRET_KEY": "k"}, "integer"),
        ({"PIASTRIX_SHOP_ID": "1"}, "PIASTRIX_SECRET_KEY"),
        ({"PIASTRIX_SHOP_ID": "1", "PIASTRIX_SECRET_KEY": ""}, "PIASTRIX_SECRET_KEY"),
        ({"PIASTRIX_SHOP_ID": "1", "PIASTRIX_SECRET_KEY": "k", "PIASTRIX_URL": " "}, "PIASTRIX_URL"),
        ({"PIASTRIX_SHOP_ID": "1", "PIASTRIX_SECRET_KEY": "k", "PIASTRIX_TIMEOUT": "soon"}, "PIASTRIX_TIMEOUT"),
        ({"PIASTRIX_SHOP_ID": "1", "PIASTRIX_SECRET_KEY": "k", "PIASTRIX_TIMEOUT": "0"}, "PIASTRIX_TIMEOUT"),
    ],
)
def test_invalid_configuration(values, message):
    with pytest.raises(ConfigError, match=message):
        ClientConfig.from_mapping(values)


def test_build_environment_parses_file_without_replacing_base(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "A=file\nexport B=\"quoted\"\nnot a pair\n# C=comment\n", encoding="utf-8"
    )
    base = {"A": "existing"}

    merged = build_environment(env_file=str(env_file), base=base)

    assert merged == {"A": "existing", "B": "quoted"}
    assert base == {"A": "existing"}


def test_build_environment_skips_file_when_none():
    merged = build_environment(env_file=None, base={"X": "1"}, overrides={"X": "2", "Y": "3"})

    assert merged == {"X": "2", "Y": "3"}
