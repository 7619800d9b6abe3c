from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker

from app.main import app
from app.core.limiter import limiter
from app.db.base import Base
from app.db.session import get_db
from app.db.store import DocumentStore
from app.services.college_matcher import reset_matcher
from app.services.notifications import get_email_sender

# Setup In-Memory DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class RecordingEmailSender:
    """Stands in for EmailSender and keeps every message it was asked to send."""

    def __init__(self):
        self.otps = []
        self.welcomes = []

    async def send_otp(self, to_email, code, expiry_minutes):
        self.otps.append((to_email, code))

    async def send_welcome(self, to_email):
        self.welcomes.append(to_email)

    def last_code(self, email):
        codes = [code for to, code in self.otps if to == email]
        return codes[-1] if codes else None


class FakeClock:
    def __init__(self, start=None):
        self.current = start or datetime(2025, 1, 1, 12, 0, 0)

    def __call__(self):
        return self.current

    def advance(self, **kwargs):
        self.current += timedelta(**kwargs)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def store(db):
    return DocumentStore(db)


@pytest.fixture
def sender():
    return RecordingEmailSender()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client(db, sender):
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_email_sender] = lambda: sender
    transport = ASGITransport(app=app)
    yield AsyncClient(transport=transport, base_url="http://test")
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_state():
    limiter.reset()
    reset_matcher()
    yield
    reset_matcher()
