"""Tests for configuration layering."""

import pytest

from kiosk_provisioner.config import ConfigError, KioskConfig, config_from_state, load_config


def test_defaults():
    cfg = load_config(environ={})

    assert cfg.user == "kiosk"
    assert cfg.url == "https://example.com"
    assert cfg.packages == ("cage", "flatpak")
    assert str(cfg.bash_profile) == "/home/kiosk/.bash_profile"


def test_environment_overrides_defaults():
    cfg = load_config(environ={"KIOSK_USER": "lobby", "KIOSK_URL": "https://foo.example/bar"})

    assert cfg.user == "lobby"
    assert cfg.url == "https://foo.example/bar"


def test_empty_environment_values_fall_back():
    """An empty KIOSK_USER behaves like an unset one."""
    cfg = load_config(environ={"KIOSK_USER": "", "KIOSK_URL": ""})

    assert cfg.user == "kiosk"
    assert cfg.url == "https://example.com"


def test_yaml_file_then_environment(tmp_path):
    conf = tmp_path / "kiosk.yaml"
    conf.write_text("user: frontdesk\nurl: https://intranet.example\npackages: [cage, flatpak, htop]\n")

    from_file = load_config(str(conf), environ={})
    env_wins = load_config(str(conf), environ={"KIOSK_URL": "https://override.example"})

    assert from_file.user == "frontdesk"
    assert from_file.url == "https://intranet.example"
    assert from_file.packages == ("cage", "flatpak", "htop")
    assert env_wins.user == "frontdesk"
    assert env_wins.url == "https://override.example"


def test_config_path_from_environment(tmp_path):
    conf = tmp_path / "kiosk.yml"
    conf.write_text("user: signage\n")

    cfg = load_config(environ={"KIOSK_CONFIG": str(conf)})

    assert cfg.user == "signage"


@pytest.mark.parametrize(
    "body",
    [
        "- just\n- a list\n",
        "packages: cage\n",
        "user: [unbalanced\n",
    ],
)
def test_bad_config_file(tmp_path, body):
    conf = tmp_path / "kiosk.yaml"
    conf.write_text(body)

    with pytest.raises(ConfigError):
        load_config(str(conf), environ={})


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "absent.yaml"), environ={})


@pytest.mark.parametrize("user", ["../etc", "-r", "   "])
def test_invalid_user(user):
    with pytest.raises(ConfigError):
        load_config(environ={"KIOSK_USER": user})


def test_state_round_trip(tmp_path):
    cfg = KioskConfig(user="lobby", url="https://a.example", root=str(tmp_path), dry_run=True)
    bare = KioskConfig(root=str(tmp_path), packages=())

    assert config_from_state({"config": cfg.as_state()}) == cfg
    assert config_from_state({"config": bare.as_state()}).packages == ()


def test_empty_package_list_is_kept(tmp_path):
    conf = tmp_path / "kiosk.yaml"
    conf.write_text("packages: []\n")

    cfg = load_config(str(conf), environ={})

    assert cfg.packages == ()
    assert config_from_state({"config": cfg.as_state()}).packages == ()


def test_url_taken_verbatim():
    cfg = load_config(environ={"KIOSK_URL": " https://foo.example/bar "})

    assert cfg.url == " https://foo.example/bar "
