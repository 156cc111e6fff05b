from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from motion_control.drive import Drive
from motion_control.follower import Follower, FollowerException, TickOutcome
from motion_control.geometry import Position, Translation

from .group import FollowerGroup, as_group

logger = logging.getLogger(__name__)


class ExecutorManager:
    """FIFO of follower groups, advancing the head group once per tick.

    When the head group finishes it is removed on that same tick; the next
    group is not ticked until the following call, so exactly one group moves
    per cycle.
    """

    def __init__(self, drive: Drive) -> None:
        if drive is None:
            raise ValueError("ExecutorManager.drive must not be None.")
        self.drive = drive
        self._queue: deque[FollowerGroup] = deque()
        # bumped by every clear so an in-flight tick can tell it was cancelled
        self._generation = 0
        self.last_marker: Position | None = None

    @property
    def executor_count(self) -> int:
        return len(self._queue)

    @property
    def current_group(self) -> FollowerGroup | None:
        return self._queue[0] if self._queue else None

    def add_executor(self, group_or_followers: FollowerGroup | Follower | Iterable[Follower]) -> FollowerGroup:
        group = as_group(group_or_followers)
        self._queue.append(group)
        logger.info("Queued follower group %d (%d followers)", len(self._queue), len(group))
        return group

    def is_active(self) -> bool:
        return bool(self._queue)

    def is_inactive(self) -> bool:
        return not self._queue

    def tick(self) -> bool:
        """Advance the head group. Errors raised by followers propagate.

        Returns:
            True while groups remain queued after this tick.
        """
        if not self._queue:
            return False
        generation = self._generation
        group = self._queue[0]
        finished = group.tick(lambda: self._generation == generation)
        self.last_marker = group.followers[0].last_marker
        if self._generation != generation:
            # cleared from inside the tick; a command may have followed the halt
            self.drive.set_translation(Translation.ZERO)
            logger.info("Follower group cancelled mid-tick")
            return self.is_active()
        if finished:
            self._queue.popleft()
            logger.info("Follower group finished; %d remaining", len(self._queue))
        return self.is_active()

    def step(self) -> TickOutcome:
        """Like :meth:`tick`, but halts and reports ERROR instead of raising."""
        try:
            active = self.tick()
        except (FollowerException, ValueError) as exc:
            self.clear_executors()
            logger.warning("Follower group aborted: %s", exc)
            return TickOutcome.ERROR
        return TickOutcome.CONTINUE if active else TickOutcome.DONE

    def clear_executors(self) -> None:
        dropped = len(self._queue)
        self._queue.clear()
        self._generation += 1
        self.drive.set_translation(Translation.ZERO)
        if dropped:
            logger.info("Cleared %d queued follower groups", dropped)
