import pytest
from pydantic import ValidationError

from src.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("BEAN_WEIGHT", "ROAST_LEVEL", "RATIO", "UNIT"):
        monkeypatch.delenv(f"CAPPUCCINO_DEFAULT_{name}", raising=False)
    monkeypatch.delenv("CAPPUCCINO_LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.default_bean_weight == 18.0
    assert settings.default_roast_level == "Medium"
    assert settings.default_ratio == 2.0
    assert settings.default_unit == "ml"
    assert settings.log_level == "INFO"


def test_env_overrides_are_normalised(monkeypatch):
    monkeypatch.setenv("CAPPUCCINO_DEFAULT_BEAN_WEIGHT", "20")
    monkeypatch.setenv("CAPPUCCINO_DEFAULT_ROAST_LEVEL", "dark")
    monkeypatch.setenv("CAPPUCCINO_DEFAULT_RATIO", "2.5")
    monkeypatch.setenv("CAPPUCCINO_DEFAULT_UNIT", "G")
    monkeypatch.setenv("CAPPUCCINO_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.default_bean_weight == 20.0
    assert settings.default_roast_level == "Dark"
    assert settings.default_ratio == 2.5
    assert settings.default_unit == "g"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("CAPPUCCINO_DEFAULT_BEAN_WEIGHT", "0.5"),
        ("CAPPUCCINO_DEFAULT_ROAST_LEVEL", "blonde"),
        ("CAPPUCCINO_DEFAULT_RATIO", "3"),
        ("CAPPUCCINO_DEFAULT_UNIT", "oz"),
        ("CAPPUCCINO_LOG_LEVEL", "loud"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    get_settings.cache_clear()

    assert get_settings() is get_settings()
