from __future__ import annotations

import logging

import pytest

from cryptoharness.config import (
    HKDF_LENGTH_ENV,
    LOG_LEVEL_ENV,
    OUTPUT_ENV,
    Settings,
    hkdf_length,
    load_settings,
)


def test_defaults_when_environment_is_empty():
    assert load_settings({}) == Settings(log_level=logging.WARNING, output="base64", hkdf_length=None)


def test_reads_every_variable():
    settings = load_settings({LOG_LEVEL_ENV: "debug", OUTPUT_ENV: "HEX", HKDF_LENGTH_ENV: "42"})
    assert settings.log_level == logging.DEBUG
    assert settings.output == "hex"
    assert settings.hkdf_length == 42


@pytest.mark.parametrize(
    "env,name",
    [
        ({LOG_LEVEL_ENV: "chatty"}, LOG_LEVEL_ENV),
        ({OUTPUT_ENV: "base32"}, OUTPUT_ENV),
        ({HKDF_LENGTH_ENV: "forty"}, HKDF_LENGTH_ENV),
        ({HKDF_LENGTH_ENV: "0"}, HKDF_LENGTH_ENV),
    ],
)
def test_invalid_values_name_the_variable(env, name):
    with pytest.raises(ValueError) as excinfo:
        load_settings(env)
    assert name in str(excinfo.value)


def test_hkdf_length_reads_live_environment(monkeypatch):
    monkeypatch.delenv(HKDF_LENGTH_ENV, raising=False)
    assert hkdf_length() is None
    monkeypatch.setenv(HKDF_LENGTH_ENV, "16")
    assert hkdf_length() == 16
