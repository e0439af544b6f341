import pytest

from quotevote.errors import ConfigError
from quotevote.utils.config import DEFAULT_CONFIG, load_config, parse_color


def test_defaults_without_file(monkeypatch):
    monkeypatch.delenv("QUOTEVOTE_CONFIG", raising=False)
    assert load_config() == DEFAULT_CONFIG
    assert DEFAULT_CONFIG.saturation_threshold == 100


def test_yaml_overrides(tmp_path):
    path = tmp_path / "highlight.yaml"
    path.write_text(
        "saturation_threshold: 20\nup_color: '#0000ff'\nextra: 1\n", encoding="utf-8"
    )
    config = load_config(path)
    assert config.saturation_threshold == 20
    assert config.up_color == (0, 0, 255)
    assert config.down_color == (255, 0, 0)


def test_env_points_at_file(tmp_path, monkeypatch):
    path = tmp_path / "c.yaml"
    path.write_text("min_opacity: 0.2\n", encoding="utf-8")
    monkeypatch.setenv("QUOTEVOTE_CONFIG", str(path))
    assert load_config().min_opacity == 0.2


def test_missing_file_uses_defaults(tmp_path):
    assert load_config(tmp_path / "nope.yaml") == DEFAULT_CONFIG


@pytest.mark.parametrize("body", [
    "saturation_threshold: 0\n",
    "saturation_threshold: 2.7\n",
    "saturation_threshold: lots\n",
    "saturation_threshold: true\n",
    "min_opacity: 0.9\nmax_opacity: 0.5\n",
    "down_color: [300, 0, 0]\n",
    "- just\n- a list\n",
])
def test_invalid_config(tmp_path, body):
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_parse_color():
    assert parse_color([1, 2, 3]) == (1, 2, 3)
    assert parse_color("#52b274") == (82, 178, 116)
    with pytest.raises(ConfigError):
        parse_color("green")
