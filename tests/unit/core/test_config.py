import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from passrule.core.config import Settings, get_settings


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    get_settings.cache_clear()

    settings = Settings()

    assert settings.app_name == "PassRule"
    assert settings.environment == "development"
    assert settings.min_length == 8
    assert settings.max_length == 64
    assert settings.characteristics_required == 3
    assert settings.report_characteristic_failures is False
    assert settings.sequence_length == 5
    assert settings.repeat_length == 4
    assert settings.generate_length == 16
    assert settings.is_development is True
    assert settings.is_production is False
    assert settings.is_testing is False


def test_settings_env_override():
    """Test that environment variables override defaults."""
    get_settings.cache_clear()

    with patch.dict(os.environ, {
        "PASSRULE_ENVIRONMENT": "production",
        "PASSRULE_MIN_LENGTH": "12",
        "PASSRULE_CHARACTERISTICS_REQUIRED": "4",
        "PASSRULE_REPORT_CHARACTERISTIC_FAILURES": "true",
    }):
        settings = Settings()

        assert settings.environment == "production"
        assert settings.min_length == 12
        assert settings.characteristics_required == 4
        assert settings.report_characteristic_failures is True
        assert settings.is_production is True


def test_get_settings_is_cached():
    """Test that get_settings returns the same instance."""
    get_settings.cache_clear()
    assert get_settings() is get_settings()


def test_max_length_below_min_length_rejected():
    """Test that inverted length bounds fail validation."""
    with pytest.raises(ValidationError, match="max_length"):
        Settings(min_length=20, max_length=10)


@pytest.mark.parametrize("value", [0, 5])
def test_characteristics_required_out_of_range(value):
    """Test that the M-of-4 threshold must be between 1 and 4."""
    with pytest.raises(ValidationError, match="characteristics_required"):
        Settings(characteristics_required=value)


def test_sequence_length_minimum():
    """Test that sequence windows shorter than 3 are rejected."""
    with pytest.raises(ValidationError):
        Settings(sequence_length=2)
