"""Tick-driven scheduler with cancellable periodic tasks."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

TickCallback = Callable[[int], None]


@dataclass
class Periodic:
    """Recurring task. Fires every `interval` ticks until cancelled."""

    name: str
    interval: int
    callback: TickCallback
    elapsed: int = 0


class TaskHandle:
    """Owned reference to a scheduled task."""

    __slots__ = ("_scheduler", "_task_id", "name")

    def __init__(self, scheduler: Scheduler, task_id: int, name: str) -> None:
        self._scheduler = scheduler
        self._task_id = task_id
        self.name = name

    @property
    def active(self) -> bool:
        return self._scheduler._has(self._task_id)

    def cancel(self) -> None:
        self._scheduler._cancel(self._task_id)


class Scheduler:
    """Runs tasks against a discrete tick counter.

    ``advance()`` processes the tasks that were live when the tick began.
    Tasks scheduled from a callback first run on the following tick, and
    tasks cancelled from a callback do not fire.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Periodic] = {}
        self._next_id = 0
        self._tick_number = 0

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def every(self, name: str, interval: int, callback: TickCallback) -> TaskHandle:
        if interval <= 0:
            raise ValueError("interval must be positive")
        task_id = self._next_id
        self._next_id += 1
        self._tasks[task_id] = Periodic(name=name, interval=interval, callback=callback)
        return TaskHandle(self, task_id, name)

    def advance(self) -> int:
        self._tick_number += 1
        for task_id, task in list(self._tasks.items()):
            if task_id not in self._tasks:
                continue
            task.elapsed += 1
            if task.elapsed >= task.interval:
                task.elapsed = 0
                task.callback(self._tick_number)
        return self._tick_number

    def pending(self) -> list[str]:
        return [task.name for task in self._tasks.values()]

    def _has(self, task_id: int) -> bool:
        return task_id in self._tasks

    def _cancel(self, task_id: int) -> None:
        self._tasks.pop(task_id, None)
