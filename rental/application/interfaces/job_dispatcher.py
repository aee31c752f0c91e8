from typing import Any, Awaitable, Callable, Protocol

Job = Callable[[], Awaitable[None]]


class JobDispatcher(Protocol):
    def dispatch(self, name: str, job: Job, **context: Any) -> bool:
        """
        Hand a job to background execution without waiting for it.

        Must never raise; returns False when the job could not be queued.
        """
        ...
