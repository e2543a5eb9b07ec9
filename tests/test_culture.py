from __future__ import annotations

import threading
from pathlib import Path

from unitkit.config import Settings
from unitkit.culture import INVARIANT_CULTURE, get_current_culture, normalize_culture, use_culture


def test_normalize_culture() -> None:
    assert normalize_culture("en-US") == "en-US"
    assert normalize_culture("en_us") == "en-US"
    assert normalize_culture(" RU-ru ") == "ru-RU"
    assert normalize_culture("NB") == "nb"
    assert normalize_culture("") == INVARIANT_CULTURE
    assert normalize_culture(None) == INVARIANT_CULTURE


def test_use_culture_nests_and_restores() -> None:
    before = get_current_culture()

    with use_culture("ru_RU") as outer:
        assert outer == "ru-RU"
        with use_culture("nb-NO"):
            assert get_current_culture() == "nb-NO"
        assert get_current_culture() == "ru-RU"

    assert get_current_culture() == before


def test_culture_is_local_to_the_thread() -> None:
    seen: list[str] = []

    with use_culture("ru-RU"):
        worker = threading.Thread(target=lambda: seen.append(get_current_culture()))
        worker.start()
        worker.join()

    assert seen == [get_current_culture()]


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("UNITKIT_CULTURE", "ru-RU")
    monkeypatch.setenv("UNITKIT_DEFINITIONS", str(tmp_path))
    monkeypatch.delenv("UNITKIT_OUTPUT", raising=False)
    monkeypatch.delenv("UNITKIT_FALLBACK_CULTURE", raising=False)

    settings = Settings.from_env()

    assert settings.default_culture == "ru-RU"
    assert settings.fallback_culture == "en-US"
    assert settings.definitions_dir == tmp_path
    assert settings.output_dir.name == "unitkit"


def test_fallback_culture_from_env(monkeypatch) -> None:
    monkeypatch.setenv("UNITKIT_FALLBACK_CULTURE", "ru-RU")

    assert Settings.from_env().fallback_culture == "ru-RU"


def test_settings_defaults_point_at_project() -> None:
    settings = Settings()

    assert settings.default_culture == "en-US"
    assert settings.definitions_dir.name == "definitions"
    assert settings.output_dir.name == "unitkit"
