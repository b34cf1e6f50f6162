from datetime import datetime, timedelta, timezone

from modules.auth.models import Session


def make_session(expired_at: datetime) -> Session:
    return Session(session_key="key-abc", user_id="user-123", expired_at=expired_at)


class TestSession:
    def test_future_expiry_is_live(self):
        session = make_session(datetime.now(timezone.utc) + timedelta(days=7))
        assert session.is_expired() is False

    def test_past_expiry_is_expired(self):
        session = make_session(datetime.now(timezone.utc) - timedelta(seconds=1))
        assert session.is_expired() is True

    def test_explicit_now(self):
        expiry = datetime(2026, 1, 8, tzinfo=timezone.utc)
        session = make_session(expiry)
        assert session.is_expired(now=expiry - timedelta(minutes=1)) is False
        assert session.is_expired(now=expiry) is True

    def test_naive_expiry_is_treated_as_utc(self):
        session = make_session(datetime(2026, 1, 8))
        assert session.is_expired(now=datetime(2026, 1, 7, tzinfo=timezone.utc)) is False

    def test_parses_store_timestamp(self):
        """Rows from the store carry ISO strings."""
        session = Session(
            session_key="key-abc",
            user_id="user-123",
            expired_at="2026-01-08T10:00:00+00:00",
        )
        assert session.expired_at == datetime(2026, 1, 8, 10, tzinfo=timezone.utc)
