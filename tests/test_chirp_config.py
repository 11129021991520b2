"""tests for formatter configuration."""

import dataclasses

import pytest

from chirp_config import CHIRP_HEADERS, DEFAULT_CONFIG, DEFAULT_SUBSTITUTIONS, NAME_LIMIT, ChirpConfig


def test_defaults() -> None:
    assert DEFAULT_CONFIG.name_limit == NAME_LIMIT == 10
    assert DEFAULT_CONFIG.substitutions == DEFAULT_SUBSTITUTIONS
    assert DEFAULT_CONFIG.headers[0] == "Location"
    assert ",".join(CHIRP_HEADERS) == (
        "Location,Name,Frequency,Duplex,Offset,Tone,rToneFreq,cToneFreq,"
        "DtcsCode,DtcsPolarity,Mode,TStep,Skip,Comment"
    )


def test_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.name_limit = 8


def test_with_name_limit_returns_copy() -> None:
    short = DEFAULT_CONFIG.with_name_limit(8)
    assert short.name_limit == 8
    assert DEFAULT_CONFIG.name_limit == 10
    assert short.substitutions == DEFAULT_CONFIG.substitutions


def test_dict_substitutions_keep_order() -> None:
    config = ChirpConfig(substitutions={"Safety": "Sfty", "Public Safety": "PS"})
    assert config.substitutions == (("Safety", "Sfty"), ("Public Safety", "PS"))


def test_invalid_name_limit() -> None:
    with pytest.raises(ValueError, match="name_limit"):
        ChirpConfig(name_limit=0)
