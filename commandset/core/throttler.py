"""Rate limiting of command invocations, globally or per user/member/guild.

Windows expire lazily: each entry stores the timestamp at which it ends and
every read compares it to the clock, so no background timer is involved.
"""

import logging
import math
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class ThrottlerScope(str, Enum):
    GLOBAL = "global"
    USER = "user"
    MEMBER = "member"
    GUILD = "guild"


@dataclass
class ThrottlerData:
    current: int
    expires_at: float


class CommandThrottler(ABC):
    """Counts triggers inside a window of ``duration`` seconds.

    ``increment`` returns whether the limit was already reached before the
    call and always counts the call, so a rejected attempt still uses a slot
    of the window.
    """

    scope: ThrottlerScope

    def __init__(self, count: int, duration: float, clock: Clock | None = None) -> None:
        if not isinstance(count, int) or isinstance(count, bool) or count < 1:
            raise ValueError(f"Throttler count must be a positive integer, got {count!r}")
        if duration <= 0:
            raise ValueError(f"Throttler duration must be positive, got {duration!r}")
        self.count = count
        self.duration = duration
        self._clock = clock or time.monotonic

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scope={self.scope.value!r}, count={self.count}, duration={self.duration})"

    @abstractmethod
    def _lookup(self, subject: Any) -> ThrottlerData | None:
        """Return the live window for the subject, or None."""

    @abstractmethod
    def _start(self, subject: Any) -> ThrottlerData | None:
        """Open a new window for the subject, or None if the scope does not apply."""

    @abstractmethod
    def reset(self, subject: Any = None) -> None:
        pass

    def _is_live(self, data: ThrottlerData | None) -> bool:
        return data is not None and self._clock() < data.expires_at

    def get_current(self, subject: Any = None) -> int:
        data = self._lookup(subject)
        return data.current if data else 0

    def get_throttled(self, subject: Any = None) -> bool:
        return self.get_current(subject) >= self.count

    def get_cooldown(self, subject: Any = None) -> int:
        """Seconds, rounded up, until the window of the subject ends."""
        data = self._lookup(subject)
        if not data:
            return 0
        return math.ceil(data.expires_at - self._clock())

    def increment(self, subject: Any = None) -> bool:
        data = self._lookup(subject) or self._start(subject)
        if data is None:
            return False
        reached_limit = data.current >= self.count
        data.current += 1
        if reached_limit:
            logger.debug(f"{self!r} throttled {subject!r} ({data.current}/{self.count})")
        return reached_limit


class GlobalThrottler(CommandThrottler):
    """One window shared by every invocation."""

    scope = ThrottlerScope.GLOBAL

    def __init__(self, count: int, duration: float, clock: Clock | None = None) -> None:
        super().__init__(count, duration, clock)
        self._data: ThrottlerData | None = None

    def _lookup(self, subject: Any) -> ThrottlerData | None:
        return self._data if self._is_live(self._data) else None

    def _start(self, subject: Any) -> ThrottlerData:
        self._data = ThrottlerData(current=0, expires_at=self._clock() + self.duration)
        return self._data

    def reset(self, subject: Any = None) -> None:
        self._data = None


class ScopedThrottler(CommandThrottler):
    """One window per user, member or guild, created on first increment."""

    def __init__(
        self,
        scope: ThrottlerScope,
        count: int,
        duration: float,
        clock: Clock | None = None,
    ) -> None:
        scope = ThrottlerScope(scope)
        if scope is ThrottlerScope.GLOBAL:
            raise ValueError("Use GlobalThrottler for the global scope")
        super().__init__(count, duration, clock)
        self.scope = scope
        self._windows: dict[str, ThrottlerData] = {}

    def get_key(self, subject: Any) -> str | None:
        """Key of the subject in this scope; a string is used as the key itself."""
        if subject is None:
            return None
        if isinstance(subject, str):
            return subject or None

        if self.scope is ThrottlerScope.USER:
            author = getattr(subject, "author", None)
            key = getattr(author, "id", None)
        elif self.scope is ThrottlerScope.MEMBER:
            member = getattr(subject, "member", None)
            key = getattr(member, "id", None)
        else:
            key = getattr(subject, "guild_id", None)
        return None if key is None else str(key)

    def _lookup(self, subject: Any) -> ThrottlerData | None:
        key = self.get_key(subject)
        if key is None:
            return None
        data = self._windows.get(key)
        return data if self._is_live(data) else None

    def _start(self, subject: Any) -> ThrottlerData | None:
        key = self.get_key(subject)
        if key is None:
            return None
        self._purge_expired()
        data = ThrottlerData(current=0, expires_at=self._clock() + self.duration)
        self._windows[key] = data
        return data

    def _purge_expired(self) -> None:
        now = self._clock()
        for key in [k for k, d in self._windows.items() if now >= d.expires_at]:
            del self._windows[key]

    def reset(self, subject: Any = None) -> None:
        if subject is None:
            self._windows.clear()
            return
        key = self.get_key(subject)
        if key is not None:
            self._windows.pop(key, None)


class ThrottlerFactory:
    """Factory for creating throttlers from a scope name."""

    @staticmethod
    def create(
        scope: ThrottlerScope | str,
        count: int,
        duration: float,
        clock: Clock | None = None,
    ) -> CommandThrottler:
        scope = ThrottlerScope(scope)
        if scope is ThrottlerScope.GLOBAL:
            return GlobalThrottler(count, duration, clock)
        return ScopedThrottler(scope, count, duration, clock)
