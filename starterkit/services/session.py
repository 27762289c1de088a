from datetime import datetime, timedelta, timezone

from sqlalchemy import and_, delete, or_
from sqlalchemy.orm import Session, sessionmaker

from starterkit.config import INACTIVE_SESSION_RETENTION_DAYS
from starterkit.models.session import UserSession


class SessionService:
    """
    Service for authentication session storage.
    """

    def __init__(
        self,
        sessionmaker_: sessionmaker[Session],
        inactive_retention: timedelta = timedelta(days=INACTIVE_SESSION_RETENTION_DAYS),
    ) -> None:
        self.Session: sessionmaker[Session] = sessionmaker_
        self.inactive_retention = inactive_retention

    def cleanup_expired_sessions(self, now: datetime | None = None) -> int:
        """
        Delete sessions past their expiry, plus inactive sessions unused for
        longer than the retention window. Returns the number of rows deleted.
        """
        now = now or datetime.now(timezone.utc)
        stale_before = now - self.inactive_retention

        with self.Session.begin() as session:
            result = session.execute(
                delete(UserSession)
                .where(
                    or_(
                        UserSession.expires_at < now,
                        and_(
                            UserSession.is_active.is_(False),
                            UserSession.last_used_at < stale_before,
                        ),
                    )
                )
                .execution_options(synchronize_session=False)
            )
            return result.rowcount or 0
