import pytest

from availabilities.config import Settings
from availabilities.services.slots.config import AvailabilityConfig


def test_availability_config_defaults():
    config = AvailabilityConfig()
    assert config.horizon_days == 7
    assert config.slot_step_minutes == 30
    assert config.slots_per_day == 48
    assert config.snap_slot_labels is False
    assert config.dedupe_slots is True


@pytest.mark.parametrize("step", [15, 60])
def test_availability_config_rejects_other_steps(step):
    with pytest.raises(ValueError, match="slot_step_minutes"):
        AvailabilityConfig(slot_step_minutes=step)


def test_availability_config_rejects_empty_horizon():
    with pytest.raises(ValueError, match="horizon_days"):
        AvailabilityConfig(horizon_days=0)


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./data/events.db")
    monkeypatch.setenv("SNAP_SLOT_LABELS", "true")
    monkeypatch.setenv("DEDUPE_SLOTS", "0")

    settings = Settings(_env_file=None)

    assert settings.snap_slot_labels is True
    assert settings.dedupe_slots is False
    assert settings.resolved_database_url.endswith("/data/events.db")
    assert settings.resolved_database_url.startswith("sqlite:////")


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DATABASE_URL", "LOG_LEVEL", "SNAP_SLOT_LABELS", "DEDUPE_SLOTS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite://"
    assert settings.resolved_database_url == "sqlite://"
    assert settings.log_level == "INFO"
