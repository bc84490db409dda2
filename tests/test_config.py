import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("prod", "config.production"),
        ("Production", "config.production"),
        ("test", "config.testing"),
        ("staging", "config.development"),
    ],
)
def test_settings_module_from_argument(env, expected):
    assert get_settings_module(env) == expected


def test_settings_module_from_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    assert get_settings_module() == "config.testing"
    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"
