from __future__ import annotations

import json

import pytest

from core.models import ViewerFeatures
from infrastructure.settings import BASE_ORIGIN_ENV, JsonSettings, ViewerConfig


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch):
    monkeypatch.delenv(BASE_ORIGIN_ENV, raising=False)


def test_defaults_without_settings():
    config = ViewerConfig.from_settings(None)
    assert config == ViewerConfig()
    assert config.header_clearance_px == 100
    assert config.settle_delay_ms == 400
    assert config.collections_url == "https://api.minzhangphoto.com/api/collections"


def test_file_values_are_applied(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "api": {"base_origin": "http://localhost:8000/", "timeout_s": 5},
                "scroll": {"header_clearance_px": 64, "settle_delay_ms": 250},
                "features": {"contact_sheet": False},
            }
        ),
        encoding="utf-8",
    )
    config = ViewerConfig.from_settings(JsonSettings(path))

    assert config.base_origin == "http://localhost:8000/"
    assert config.collections_url == "http://localhost:8000/api/collections"
    assert config.timeout_s == 5.0
    assert config.header_clearance_px == 64
    assert config.settle_delay_ms == 250
    assert config.features == ViewerFeatures(contact_sheet=False)


def test_invalid_values_fall_back_per_key():
    settings = JsonSettings.from_dict(
        {
            "api": {"base_origin": 42, "timeout_s": "soon"},
            "scroll": {"header_clearance_px": -5, "highlight_ms": "long"},
            "features": {"parallax_hero": "yes"},
        }
    )
    config = ViewerConfig.from_settings(settings)
    defaults = ViewerConfig()

    assert config.base_origin == defaults.base_origin
    assert config.timeout_s == defaults.timeout_s
    assert config.header_clearance_px == defaults.header_clearance_px
    assert config.highlight_ms == defaults.highlight_ms
    assert config.features.parallax_hero is True


def test_environment_overrides_base_origin(monkeypatch):
    monkeypatch.setenv(BASE_ORIGIN_ENV, "https://staging.example.com/")
    settings = JsonSettings.from_dict({"api": {"base_origin": "https://ignored.example.com"}})
    config = ViewerConfig.from_settings(settings)
    assert config.base_origin == "https://staging.example.com/"
    assert config.collections_url == "https://staging.example.com/api/collections"


def test_dotted_get_returns_default_for_missing_keys():
    settings = JsonSettings.from_dict({"api": {"timeout_s": 3}})
    assert settings.get("api.timeout_s") == 3
    assert settings.get("api.missing", "x") == "x"
    assert settings.get("api.timeout_s.deeper") is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        JsonSettings(tmp_path / "absent.json")
