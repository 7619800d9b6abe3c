import threading
from datetime import timedelta

import pytest
from sqlalchemy.orm import sessionmaker

from app.db.crud.users import create_user
from app.jobs.retention import run_retention
from app.services import worker
from app.services.otp_service import OTPManager
from app.services.security_service import create_session, destroy_session, get_active_session


def test_session_expiry_is_fixed(db, store, clock):
    user = create_user(db, "s@example.com")
    session = create_session(db, user.id, user.email, ip_address="10.0.0.1", now=clock)

    assert session.expires_at == clock() + timedelta(hours=24)
    assert get_active_session(db, session.id, now=clock).user_id == user.id

    clock.advance(hours=23, minutes=59)
    assert get_active_session(db, session.id, now=clock) is not None

    clock.advance(minutes=1)
    assert get_active_session(db, session.id, now=clock) is None


def test_destroy_session(db, clock):
    user = create_user(db, "d@example.com")
    session = create_session(db, user.id, user.email, now=clock)

    assert destroy_session(db, session.id) is True
    assert destroy_session(db, session.id) is False
    assert get_active_session(db, session.id, now=clock) is None
    assert destroy_session(db, None) is False


@pytest.mark.asyncio
async def test_retention_sweeps_otps_and_sessions(db, store, sender, clock):
    user = create_user(db, "r@example.com")
    create_session(db, user.id, user.email, now=clock)
    await OTPManager(store, sender, now=clock).request_code("r@example.com")

    assert run_retention(db, now=clock) == {"otps": 0, "sessions": 0}

    clock.advance(hours=25)
    assert run_retention(db, now=clock) == {"otps": 1, "sessions": 1}
    assert store.count("sessions") == 0
    assert store.count("otps") == 0


@pytest.mark.asyncio
async def test_sweep_worker_purges_expired_records(db, store, sender, clock, monkeypatch):
    # The fixed clock sits well before the wall clock the worker sweeps with
    user = create_user(db, "w@example.com")
    create_session(db, user.id, user.email, now=clock)
    await OTPManager(store, sender, now=clock).request_code("w@example.com")

    results = []
    swept = threading.Event()

    def recording_retention(session):
        results.append(run_retention(session))
        swept.set()

    monkeypatch.setattr(worker, "SessionLocal", sessionmaker(bind=db.get_bind()))
    monkeypatch.setattr(worker, "run_retention", recording_retention)

    sweeper = worker.SweepWorker(interval=60)
    sweeper.start()
    assert swept.wait(timeout=5)
    sweeper.stop()
    sweeper.join(timeout=5)

    assert not sweeper.is_alive()
    assert results == [{"otps": 1, "sessions": 1}]
    assert store.count("otps") == 0
    assert store.count("sessions") == 0
