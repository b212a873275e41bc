import pytest
from pydantic import ValidationError

from runova.core.config import Settings


def test_default_distance_unit_accepts_known_units():
    assert Settings(default_distance_unit="km").default_distance_unit == "km"


def test_default_distance_unit_rejects_unknown_unit():
    with pytest.raises(ValidationError):
        Settings(default_distance_unit="miles")


def test_empty_optional_env_values_become_none(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.setenv("JWT_AUDIENCE", "")
    s = Settings()
    assert s.openai_api_key is None
    assert s.jwt_audience is None
