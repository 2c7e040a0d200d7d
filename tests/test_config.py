"""Tests for package settings."""

import logging

from boundingspace.config import Settings, settings, setup_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv('BOUNDINGSPACE_DEFAULT_DTYPE', raising=False)
    monkeypatch.delenv('BOUNDINGSPACE_LOG_LEVEL', raising=False)
    config = Settings(_env_file=None)
    assert config.default_dtype == 'float64'
    assert config.log_level == 'warning'


def test_environment_override(monkeypatch):
    monkeypatch.setenv('BOUNDINGSPACE_DEFAULT_DTYPE', 'float32')
    monkeypatch.setenv('BOUNDINGSPACE_LOG_LEVEL', 'debug')
    config = Settings(_env_file=None)
    assert config.default_dtype == 'float32'
    assert config.log_level == 'debug'


def test_setup_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, 'basicConfig',
                        lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(settings, 'log_level', 'info')
    setup_logging()
    assert calls[0]['level'] == logging.INFO
