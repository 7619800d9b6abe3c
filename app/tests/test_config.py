import os
import pytest
from unittest.mock import patch

from app.core.config import Settings

def test_postgres_scheme_is_rewritten():
    with patch.dict(os.environ, {"DATABASE_URL": "postgres://user:pw@localhost:5432/portal"}):
        settings = Settings(_env_file=None)
        assert settings.DATABASE_URL == "postgresql://user:pw@localhost:5432/portal"

def test_sqlite_url_untouched():
    with patch.dict(os.environ, {"DATABASE_URL": "sqlite:///./portal.db"}):
        assert Settings(_env_file=None).DATABASE_URL == "sqlite:///./portal.db"

def test_database_url_is_required():
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ValueError): # Pydantic raises ValidationError which wraps ValueError
            Settings(_env_file=None)

def test_defaults():
    with patch.dict(os.environ, {"DATABASE_URL": "sqlite:///:memory:"}, clear=True):
        settings = Settings(_env_file=None)
        assert settings.OTP_EXPIRY_MINUTES == 10
        assert settings.OTP_MAX_REQUESTS == 3
        assert settings.OTP_WINDOW_MINUTES == 15
        assert settings.OTP_SINGLE_ACTIVE_CODE is False
        assert settings.SESSION_MAX_AGE_HOURS == 24
        assert settings.MATCH_THRESHOLD == 0.2
        assert settings.is_production is False

def test_production_flag():
    with patch.dict(os.environ, {"DATABASE_URL": "sqlite:///:memory:", "ENVIRONMENT": "production"}):
        assert Settings(_env_file=None).is_production is True
