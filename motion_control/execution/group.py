from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from motion_control.follower import Follower


class FollowerGroup:
    """Followers that are driven together and finish together.

    Followers are ticked in insertion order. A follower that has already
    finished is skipped so it never issues another command.
    """

    def __init__(self, followers: Iterable[Follower]) -> None:
        self._followers = tuple(followers)
        if not self._followers:
            raise ValueError("FollowerGroup needs at least one follower.")
        controllers = [follower.turn_controller for follower in self._followers]
        if len({id(controller) for controller in controllers}) != len(controllers):
            raise ValueError("Followers in a FollowerGroup must not share a turn controller.")

    @property
    def followers(self) -> tuple[Follower, ...]:
        return self._followers

    def __len__(self) -> int:
        return len(self._followers)

    def __iter__(self) -> Iterator[Follower]:
        return iter(self._followers)

    def is_done(self) -> bool:
        return all(follower.is_done for follower in self._followers)

    def tick(self, should_continue: Callable[[], bool] | None = None) -> bool:
        """Tick every unfinished follower; True once all of them are done.

        ``should_continue`` is checked before each follower; once it returns
        False the remaining followers are left untouched for this tick.
        """
        for follower in self._followers:
            if should_continue is not None and not should_continue():
                break
            if not follower.is_done:
                follower.tick()
        return self.is_done()

    def __repr__(self) -> str:
        return f"FollowerGroup({list(self._followers)!r})"


def as_group(group_or_followers: FollowerGroup | Follower | Iterable[Follower]) -> FollowerGroup:
    if isinstance(group_or_followers, FollowerGroup):
        return group_or_followers
    if isinstance(group_or_followers, Follower):
        return FollowerGroup([group_or_followers])
    return FollowerGroup(group_or_followers)
