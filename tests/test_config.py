import importlib

import pytest

import rrg_glossary.config as config
from rrg_glossary.config import StyleConfig


def test_malformed_height_does_not_break_import(monkeypatch):
    monkeypatch.setenv('RRG_TITLE_MIN_HEIGHT', 'big')
    try:
        importlib.reload(config)
        assert config.TITLE_MIN_HEIGHT == 18.0
        with pytest.raises(ValueError):
            config.StyleConfig.from_env()
    finally:
        monkeypatch.delenv('RRG_TITLE_MIN_HEIGHT')
        importlib.reload(config)


def test_height_from_env(monkeypatch):
    monkeypatch.setenv('RRG_TITLE_MIN_HEIGHT', '20')
    assert StyleConfig.from_env().title_min_height == 20.0
