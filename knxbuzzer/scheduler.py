"""Deferred execution of work items from interrupt context in the main loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Callable

Task = Callable[[], None]


class SchedulerStrategy(ABC):
    """Decides how queued work items are stored and run."""

    @abstractmethod
    def process(self) -> None:
        """Run pending work items."""

    @abstractmethod
    def schedule(self, task: Task) -> None:
        """Queue ``task`` for a later :meth:`process` call."""


class SimpleScheduler(SchedulerStrategy):
    """First-in, first-out queue drained completely on every :meth:`process`.

    Work items queued while the queue is being drained run in the same pass.
    """

    def __init__(self) -> None:
        self._queue: deque[Task] = deque()

    def process(self) -> None:
        while self._queue:
            task = self._queue.popleft()
            task()

    def schedule(self, task: Task) -> None:
        self._queue.append(task)

    def __len__(self) -> int:
        return len(self._queue)


_strategy: SchedulerStrategy | None = None


def install_strategy(strategy: SchedulerStrategy | None) -> SchedulerStrategy | None:
    """Make ``strategy`` the process-wide scheduler; ``None`` removes it.

    Returns the strategy that was installed before.
    """
    global _strategy
    previous = _strategy
    _strategy = strategy
    return previous


def schedule(task: Task) -> None:
    """Queue ``task`` on the installed strategy; dropped if none is installed."""
    if _strategy is not None:
        _strategy.schedule(task)


def process() -> None:
    """Run pending work on the installed strategy, if any."""
    if _strategy is not None:
        _strategy.process()