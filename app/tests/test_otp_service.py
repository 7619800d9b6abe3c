from datetime import timedelta

import pytest

from app.core.errors import InvalidOrExpired, RateLimited
from app.services.otp_service import OTPManager, generate_otp_code


def make_manager(store, sender, clock, **kwargs):
    kwargs.setdefault("single_active_code", False)
    return OTPManager(store, sender, now=clock, expiry_minutes=10, max_requests=3, window_minutes=15, **kwargs)


def test_generated_codes_are_six_digits():
    for _ in range(200):
        code = generate_otp_code()
        assert len(code) == 6
        assert code.isdigit()
        assert code[0] != "0"


@pytest.mark.asyncio
async def test_request_code_stores_and_sends(store, sender, clock):
    manager = make_manager(store, sender, clock)
    record = await manager.request_code("a@example.com")

    assert record.is_used is False
    assert record.expires_at == clock() + timedelta(minutes=10)
    assert sender.otps == [("a@example.com", record.otp_code)]
    assert manager.latest_code("a@example.com").id == record.id


@pytest.mark.asyncio
async def test_fourth_request_in_window_is_rate_limited(store, sender, clock):
    manager = make_manager(store, sender, clock)
    for _ in range(3):
        await manager.request_code("a@example.com")
        clock.advance(minutes=1)

    with pytest.raises(RateLimited):
        await manager.request_code("a@example.com")
    assert len(sender.otps) == 3

    # Other addresses are unaffected
    await manager.request_code("b@example.com")

    # Window slides past the first three codes
    clock.advance(minutes=15)
    assert not manager.is_rate_limited("a@example.com")
    await manager.request_code("a@example.com")


@pytest.mark.asyncio
async def test_code_verifies_only_once(store, sender, clock):
    manager = make_manager(store, sender, clock)
    record = await manager.request_code("a@example.com")

    used = manager.verify_code("a@example.com", record.otp_code)
    assert used.is_used is True

    with pytest.raises(InvalidOrExpired):
        manager.verify_code("a@example.com", record.otp_code)


@pytest.mark.asyncio
async def test_expired_code_never_verifies(store, sender, clock):
    manager = make_manager(store, sender, clock)
    record = await manager.request_code("a@example.com")

    clock.advance(minutes=10)
    with pytest.raises(InvalidOrExpired):
        manager.verify_code("a@example.com", record.otp_code)


@pytest.mark.asyncio
async def test_wrong_code_or_email_fails(store, sender, clock):
    manager = make_manager(store, sender, clock)
    record = await manager.request_code("a@example.com")
    wrong = "111111" if record.otp_code != "111111" else "222222"

    with pytest.raises(InvalidOrExpired):
        manager.verify_code("a@example.com", wrong)
    with pytest.raises(InvalidOrExpired):
        manager.verify_code("b@example.com", record.otp_code)


@pytest.mark.asyncio
async def test_earlier_codes_stay_valid_by_default(store, sender, clock):
    manager = make_manager(store, sender, clock)
    first = await manager.request_code("a@example.com")
    clock.advance(minutes=1)
    await manager.request_code("a@example.com")

    assert manager.verify_code("a@example.com", first.otp_code).id == first.id


@pytest.mark.asyncio
async def test_single_active_code_invalidates_earlier_codes(store, sender, clock):
    manager = make_manager(store, sender, clock, single_active_code=True)
    first = await manager.request_code("a@example.com")
    clock.advance(minutes=1)
    second = await manager.request_code("a@example.com")

    if first.otp_code != second.otp_code:
        with pytest.raises(InvalidOrExpired):
            manager.verify_code("a@example.com", first.otp_code)
    assert manager.verify_code("a@example.com", second.otp_code).id == second.id


@pytest.mark.asyncio
async def test_sweep_removes_only_expired_unused(store, sender, clock):
    manager = make_manager(store, sender, clock)
    used = await manager.request_code("a@example.com")
    manager.verify_code("a@example.com", used.otp_code)
    await manager.request_code("b@example.com")

    clock.advance(minutes=5)
    await manager.request_code("c@example.com")

    clock.advance(minutes=6)
    assert manager.sweep_expired() == 1
    assert store.count("otps") == 2
    assert store.find_one("otps", {"email": "b@example.com"}) is None


@pytest.mark.asyncio
async def test_explicit_zero_settings_are_kept(store, sender, clock):
    manager = OTPManager(store, sender, now=clock, expiry_minutes=0, max_requests=0)
    assert manager.expiry_minutes == 0
    assert manager.max_requests == 0
    assert manager.is_rate_limited("a@example.com") is True

    manager.max_requests = 3
    record = await manager.request_code("a@example.com")
    assert record.expires_at == clock()
    with pytest.raises(InvalidOrExpired):
        manager.verify_code("a@example.com", record.otp_code)
