import pytest
from pydantic import ValidationError

from geoproof.core.config import Settings
from geoproof.core.field import MODULUS


def test_default_settings():
    s = Settings()
    assert s.COMMITMENT_HASH == "pedersen"
    assert s.MAX_SAFE_SQUARED_VALUE == 2 ** 126
    assert s.MAX_COORDINATE_DELTA == 2 ** 62
    assert s.MAX_SAFE_SQUARED_VALUE < MODULUS // 2

def test_environment_override(monkeypatch):
    monkeypatch.setenv("COMMITMENT_HASH", "blake2b")
    monkeypatch.setenv("MAX_SAFE_SQUARED_VALUE", str(2 ** 100))
    s = Settings()
    assert s.COMMITMENT_HASH == "blake2b"
    assert s.MAX_SAFE_SQUARED_VALUE == 2 ** 100

def test_rejects_bound_near_modulus():
    # A bound of "prime minus one" would make the overflow guard vacuous
    with pytest.raises(ValidationError):
        Settings(MAX_SAFE_SQUARED_VALUE=MODULUS - 1)

def test_rejects_delta_bound_that_can_wrap():
    with pytest.raises(ValidationError):
        Settings(MAX_COORDINATE_DELTA=2 ** 126)

def test_rejects_non_positive_bounds():
    with pytest.raises(ValidationError):
        Settings(MAX_COORDINATE_DELTA=0)
