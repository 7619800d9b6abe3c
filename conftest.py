import os
import sys

# Set Env Vars BEFORE any imports to satisfy Pydantic Settings
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["SESSION_SECRET_KEY"] = "test-session-secret"
os.environ["SWEEP_INTERVAL_SECONDS"] = "0"
os.environ["AUTH_RATE_LIMIT"] = "1000/minute"
for key in ("SMTP_SERVER", "SMTP_USERNAME", "SMTP_PASSWORD", "SENTRY_DSN"):
    os.environ.pop(key, None)

# Add the project root to the python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), ".")))
