"""Unit tests for settings loading."""

from keto_calculator.config import Settings, get_settings

ENV_NAMES = ("LOG_LEVEL", "KETO_DEFAULT_ADJUSTMENT", "KETO_DEFAULT_NET_CARBS")


def _clear_env(monkeypatch):
    # setenv first so monkeypatch restores the original state afterwards
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults(monkeypatch, tmp_path):
    _clear_env(monkeypatch)

    settings = get_settings(env_file=str(tmp_path / "missing.env"))

    assert settings == Settings()
    assert settings.log_level == "INFO"
    assert settings.default_adjustment == -10.0
    assert settings.default_net_carbs == 30.0


def test_environment_values(monkeypatch, tmp_path):
    _clear_env(monkeypatch)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("KETO_DEFAULT_ADJUSTMENT", "-20")
    monkeypatch.setenv("KETO_DEFAULT_NET_CARBS", "25.5")

    settings = get_settings(env_file=str(tmp_path / "missing.env"))

    assert settings.log_level == "DEBUG"
    assert settings.default_adjustment == -20.0
    assert settings.default_net_carbs == 25.5


def test_env_file_values(monkeypatch, tmp_path):
    _clear_env(monkeypatch)
    env_file = tmp_path / ".env"
    env_file.write_text("KETO_DEFAULT_ADJUSTMENT=5\nKETO_DEFAULT_NET_CARBS=40\n")

    settings = get_settings(env_file=str(env_file))

    assert settings.default_adjustment == 5.0
    assert settings.default_net_carbs == 40.0


def test_invalid_number_falls_back_to_default(monkeypatch, tmp_path):
    _clear_env(monkeypatch)
    monkeypatch.setenv("KETO_DEFAULT_NET_CARBS", "lots")

    settings = get_settings(env_file=str(tmp_path / "missing.env"))

    assert settings.default_net_carbs == 30.0
