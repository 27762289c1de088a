import asyncio

from starterkit.config import LOGGER, SESSION_CLEANUP_INTERVAL_SECONDS
from starterkit.services.session import SessionService


class SessionCleanupService:
    """
    Periodically deletes expired authentication sessions.

    The schedule is an asyncio task on the caller's event loop, created by
    start() and cleared by stop(). Each pass runs the blocking delete in a
    worker thread so the loop keeps serving other work. Scheduled passes log
    errors and keep going; manual passes re-raise them.
    """

    def __init__(
        self,
        session_service: SessionService,
        interval_seconds: float = SESSION_CLEANUP_INTERVAL_SECONDS,
    ) -> None:
        self.sessions = session_service
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None
        # Passes outlive the schedule task so stop() never cuts one short
        self._passes: set[asyncio.Task] = set()

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the automatic cleanup. Requires a running event loop."""
        if self.is_running:
            LOGGER.info("[Session Cleanup] Cleanup service already running")
            return

        LOGGER.info("[Session Cleanup] Starting automatic session cleanup service")
        self._task = asyncio.get_running_loop().create_task(
            self._run_schedule(), name="session-cleanup"
        )

    def stop(self) -> None:
        """Stop the automatic cleanup. A pass already running is not interrupted."""
        if self._task is None:
            return

        self._task.cancel()
        self._task = None
        LOGGER.info("[Session Cleanup] Stopped automatic session cleanup service")

    async def _run_schedule(self) -> None:
        # First pass runs immediately
        while True:
            await asyncio.shield(self._start_pass())
            await asyncio.sleep(self.interval_seconds)

    def _start_pass(self) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(
            self._cleanup_pass(), name="session-cleanup-pass"
        )
        self._passes.add(task)
        task.add_done_callback(self._passes.discard)
        return task

    async def _cleanup_pass(self) -> int:
        try:
            deleted_count = await asyncio.to_thread(
                self.sessions.cleanup_expired_sessions
            )
        except Exception as e:
            LOGGER.error(f"[Session Cleanup] Error during cleanup: {e}")
            return 0

        if deleted_count > 0:
            LOGGER.info(
                f"[Session Cleanup] Cleaned up {deleted_count} expired sessions"
            )
        return deleted_count

    async def manual_cleanup(self) -> int:
        """Run one cleanup pass now and return the number of sessions deleted."""
        try:
            deleted_count = await asyncio.to_thread(
                self.sessions.cleanup_expired_sessions
            )
        except Exception as e:
            LOGGER.error(f"[Session Cleanup] Error during manual cleanup: {e}")
            raise

        LOGGER.info(
            f"[Session Cleanup] Manual cleanup removed {deleted_count} expired sessions"
        )
        return deleted_count

    async def run_until_stopped(self) -> None:
        """Start the schedule and wait until it is cancelled."""
        self.start()
        task = self._task
        try:
            if task is not None:
                await task
        finally:
            self.stop()
            if self._passes:
                await asyncio.gather(*self._passes)
