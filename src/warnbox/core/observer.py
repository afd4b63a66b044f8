# topmark:header:start
#
#   project      : WarnBox
#   file         : observer.py
#   file_relpath : src/warnbox/core/observer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Minimal publish/subscribe channel for registry snapshots.

Notes:
    * Subscribers are kept in an insertion-ordered dict keyed by an integer token,
      so release is O(1) and delivery follows subscription order.
    * A subscriber that raises is logged and skipped; the others still receive
      the snapshot.
    * `notify()` called from inside a callback does not recurse. The request is
      recorded and the latest snapshot is delivered again once the current round
      finishes, for at most `MAX_NOTIFY_ROUNDS` rounds.
"""

from __future__ import annotations

import itertools
import weakref
from typing import TYPE_CHECKING, Generic, TypeVar

from warnbox.config.logging import get_logger
from warnbox.constants import MAX_NOTIFY_ROUNDS

if TYPE_CHECKING:
    from collections.abc import Callable

    from warnbox.config.logging import WarnBoxLogger

logger: WarnBoxLogger = get_logger(__name__)

S = TypeVar("S")


class Subscription:
    """Handle returned by [`ObserverChannel.subscribe`][warnbox.core.observer.ObserverChannel.subscribe].

    The handle refers back to its channel weakly; it does not keep the channel alive.
    """

    def __init__(self, channel: ObserverChannel[object], token: int) -> None:
        self._channel: weakref.ref[ObserverChannel[object]] = weakref.ref(channel)
        self._token: int = token
        self._released: bool = False

    @property
    def released(self) -> bool:
        """Return True once `release()` has been called."""
        return self._released

    def release(self) -> None:
        """Stop delivery to this subscriber. Further calls have no effect."""
        if self._released:
            return
        self._released = True
        channel: ObserverChannel[object] | None = self._channel()
        if channel is not None:
            channel._remove(self._token)

    # Alias kept for callers written against the `unsubscribe()` naming.
    unsubscribe = release


class ObserverChannel(Generic[S]):
    """Ordered subscriber list delivering snapshots produced by ``snapshot_provider``.

    Args:
        snapshot_provider (Callable[[], S]): Returns the snapshot to deliver.
        max_rounds (int): Upper bound on deferred notification rounds.
    """

    def __init__(
        self,
        snapshot_provider: Callable[[], S],
        *,
        max_rounds: int = MAX_NOTIFY_ROUNDS,
    ) -> None:
        self._snapshot_provider: Callable[[], S] = snapshot_provider
        self._max_rounds: int = max_rounds
        self._subscribers: dict[int, Callable[[S], object]] = {}
        self._tokens: itertools.count[int] = itertools.count()
        self._delivering: bool = False
        self._pending: bool = False

    def __len__(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Callable[[S], object]) -> Subscription:
        """Register ``callback`` and deliver the current snapshot to it once.

        Args:
            callback (Callable[[S], object]): Receives every delivered snapshot.

        Returns:
            Subscription: Handle whose `release()` stops delivery.
        """
        token: int = next(self._tokens)
        self._subscribers[token] = callback
        subscription = Subscription(self, token)  # type: ignore[arg-type]
        logger.trace("Subscribed observer #%d (%d live)", token, len(self._subscribers))
        self._deliver(token, callback, self._snapshot_provider())
        return subscription

    def notify(self) -> None:
        """Deliver the current snapshot to every live subscriber in order."""
        if self._delivering:
            self._pending = True
            return

        self._delivering = True
        try:
            rounds: int = 0
            self._pending = True
            while self._pending:
                if rounds >= self._max_rounds:
                    logger.warning(
                        "Dropping notifications after %d rounds triggered from observers",
                        rounds,
                    )
                    break
                self._pending = False
                rounds += 1
                snapshot: S = self._snapshot_provider()
                for token in tuple(self._subscribers):
                    callback: Callable[[S], object] | None = self._subscribers.get(token)
                    if callback is None:
                        # Released earlier in this round.
                        continue
                    self._deliver(token, callback, snapshot)
        finally:
            self._pending = False
            self._delivering = False

    def _deliver(self, token: int, callback: Callable[[S], object], snapshot: S) -> None:
        try:
            callback(snapshot)
        except Exception:
            logger.exception("Observer #%d raised while handling a snapshot", token)

    def _remove(self, token: int) -> None:
        if self._subscribers.pop(token, None) is not None:
            logger.trace("Released observer #%d (%d live)", token, len(self._subscribers))
