"""Background worker pool for fire-and-forget jobs such as notifications."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from rental.application.interfaces.job_dispatcher import Job, JobDispatcher

logger = logging.getLogger(__name__)


@dataclass
class _QueuedJob:
    name: str
    job: Job
    context: dict[str, Any] = field(default_factory=dict)


class NotificationDispatcher(JobDispatcher):
    """
    Supervised pool of asyncio workers draining a bounded queue.

    ``dispatch`` never blocks the caller and never raises: a full queue or a
    stopped pool drops the job with a warning. A failing job is logged and
    the worker moves on to the next one.

    Lifecycle:
        await dispatcher.start()   # app startup
        dispatcher.dispatch("reservation_confirmed", job, reservation_id=...)
        await dispatcher.stop()    # app shutdown, drains queued jobs first
    """

    def __init__(self, workers: int = 2, queue_size: int = 100, drain_timeout_seconds: float = 10.0) -> None:
        if workers < 1:
            raise ValueError("workers must be >= 1")
        self._worker_count = workers
        self._queue_size = queue_size
        self._drain_timeout = drain_timeout_seconds
        self._queue: asyncio.Queue[_QueuedJob] | None = None
        self._tasks: list[asyncio.Task] = []
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def pending(self) -> int:
        return self._queue.qsize() if self._queue is not None else 0

    async def start(self) -> None:
        if self._running:
            return
        # The queue binds to the running loop, so it is created here
        self._queue = asyncio.Queue(maxsize=self._queue_size)
        self._tasks = [
            asyncio.create_task(self._worker(i), name=f"notification-worker-{i}")
            for i in range(self._worker_count)
        ]
        self._running = True
        logger.info("Notification dispatcher started", extra={"workers": self._worker_count})

    async def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        try:
            await asyncio.wait_for(self.join(), timeout=self._drain_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Notification queue not drained before shutdown",
                extra={"pending": self.pending},
            )
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks = []
        logger.info("Notification dispatcher stopped")

    async def join(self) -> None:
        """Wait until every queued job has been processed."""
        if self._queue is not None:
            await self._queue.join()

    def dispatch(self, name: str, job: Job, **context: Any) -> bool:
        if not self._running or self._queue is None:
            logger.warning("Dispatcher not running, dropping job %s", name, extra=context)
            return False
        try:
            self._queue.put_nowait(_QueuedJob(name=name, job=job, context=context))
        except asyncio.QueueFull:
            logger.warning("Notification queue full, dropping job %s", name, extra=context)
            return False
        return True

    async def _worker(self, index: int) -> None:
        assert self._queue is not None
        while True:
            item = await self._queue.get()
            try:
                await item.job()
                logger.info("Job %s done", item.name, extra=item.context)
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception(
                    "Job %s failed", item.name, extra={"worker": index, **item.context}
                )
            finally:
                self._queue.task_done()
