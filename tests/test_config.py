"""Tests for environment-driven configuration."""

import importlib
import os

import config


def test_credentials_path_is_exported_for_google_clients(monkeypatch):
    monkeypatch.delenv("GOOGLE_APPLICATION_CREDENTIALS", raising=False)
    monkeypatch.setenv("GOOGLE_CLOUD_CREDENTIALS_PATH", "/secrets/sa.json")
    try:
        importlib.reload(config)
        assert config.GOOGLE_CLOUD_CREDENTIALS_PATH == "/secrets/sa.json"
        assert os.environ["GOOGLE_APPLICATION_CREDENTIALS"] == "/secrets/sa.json"
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_boolean_switches_accept_common_spellings(monkeypatch):
    monkeypatch.setenv("STRICT_EXTRACTION", "Yes")
    monkeypatch.setenv("TURN_OFF_ZONE_FROM_NEXT_TOKEN", "0")
    monkeypatch.setenv("INITIAL_PLACES", "sala, cocina ,,garaje")
    try:
        importlib.reload(config)
        assert config.STRICT_EXTRACTION is True
        assert config.TURN_OFF_ZONE_FROM_NEXT_TOKEN is False
        assert config.INITIAL_PLACES == ["sala", "cocina", "garaje"]
    finally:
        monkeypatch.undo()
        importlib.reload(config)
