import logging
import time
from collections import deque
from typing import Callable, Deque, Iterable, List, Optional, Protocol, Tuple

import anyio

from schemas.content import ContentItem
from schemas.imports import Section
from schemas.navigator import NavigatorState


logger = logging.getLogger(__name__)


KEY_BINDINGS = {
    "ArrowLeft": "prev",
    "Left": "prev",
    "ArrowRight": "next",
    "Right": "next",
    "Home": "first",
    "End": "last",
}

# Minimum horizontal travel, in pixels, for a touch gesture to count as a swipe.
SWIPE_THRESHOLD = 50


class Transition:
    """Single-slot completion signal for one committed index change.

    Resolved exactly once, either by the animation driver calling
    ``complete()`` or by the navigator force-releasing it after a timeout.
    """

    def __init__(
        self,
        index: int,
        item: ContentItem,
        on_resolve: Callable[["Transition"], None],
        started_at: float,
    ):
        self.index = index
        self.item = item
        self.started_at = started_at
        self.forced = False
        self._on_resolve = on_resolve
        self._callbacks: List[Callable[["Transition"], None]] = []
        self._resolved = False
        self._event: Optional[anyio.Event] = None

    @property
    def resolved(self) -> bool:
        return self._resolved

    def complete(self) -> bool:
        return self._resolve(forced=False)

    def release(self) -> bool:
        return self._resolve(forced=True)

    def _resolve(self, forced: bool) -> bool:
        if self._resolved:
            return False
        self._resolved = True
        self.forced = forced
        if self._event is not None:
            self._event.set()
        self._on_resolve(self)
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback(self)
        return True

    def add_done_callback(self, callback: Callable[["Transition"], None]) -> None:
        if self._resolved:
            callback(self)
            return
        self._callbacks.append(callback)

    async def wait(self) -> None:
        if self._resolved:
            return
        if self._event is None:
            self._event = anyio.Event()
        await self._event.wait()


class AnimationDriver(Protocol):
    def play(self, item: ContentItem, transition: Transition) -> None:
        ...


class DeferredAnimationDriver:
    """Leaves the transition pending until a client acknowledges the effect."""

    def __init__(self, history: int = 50):
        self.pending: Optional[Transition] = None
        self.played: Deque[str] = deque(maxlen=history)

    def play(self, item: ContentItem, transition: Transition) -> None:
        self.pending = transition
        self.played.append(item.id)
        transition.add_done_callback(self._forget)

    def _forget(self, transition: Transition) -> None:
        if self.pending is transition:
            self.pending = None


class ImmediateAnimationDriver:
    """Completes every transition as soon as it starts (reduced motion)."""

    def play(self, item: ContentItem, transition: Transition) -> None:
        transition.complete()


class SectionNavigator:
    """
    Tracks which single item of a section's collection is active and
    serializes transitions between selections.

    Commands issued while a transition is in flight are dropped, not queued.
    Every command returns whether it was accepted; rejections never raise.
    """

    def __init__(
        self,
        items: Optional[Iterable[ContentItem]] = None,
        driver: Optional[AnimationDriver] = None,
        transition_timeout: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        navigator_id: Optional[str] = None,
        section: Optional[Section] = None,
    ):
        self.id = navigator_id
        self.section = section
        self.driver = driver or DeferredAnimationDriver()
        self.transition_timeout = transition_timeout
        self._clock = clock
        self._items: Tuple[ContentItem, ...] = ()
        self._loaded = False
        self._active_index = 0
        self._transition: Optional[Transition] = None
        if items is not None:
            self.load(items)

    # ------------------------------
    # Collection
    # ------------------------------
    def load(self, items: Iterable[ContentItem]) -> bool:
        if self._loaded:
            logger.warning("Navigator %s already loaded; ignoring new collection", self.id)
            return False
        self._items = tuple(items)
        self._loaded = True
        self._active_index = 0
        return True

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def items(self) -> Tuple[ContentItem, ...]:
        return self._items

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def active_item(self) -> Optional[ContentItem]:
        if not self._items:
            return None
        return self._items[self._active_index]

    @property
    def is_transitioning(self) -> bool:
        self._expire_stale_transition()
        return self._transition is not None

    @property
    def transition(self) -> Optional[Transition]:
        self._expire_stale_transition()
        return self._transition

    # ------------------------------
    # Commands
    # ------------------------------
    def next(self) -> bool:
        if self.is_transitioning or not self._items:
            return False
        return self._commit((self._active_index + 1) % len(self._items))

    def prev(self) -> bool:
        if self.is_transitioning or not self._items:
            return False
        size = len(self._items)
        return self._commit((self._active_index - 1 + size) % size)

    def jump_to(self, index) -> bool:
        if self.is_transitioning:
            return False
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        if index == self._active_index or index < 0 or index >= len(self._items):
            return False
        return self._commit(index)

    def handle_key(self, key: str) -> bool:
        action = KEY_BINDINGS.get(key)
        if action == "prev":
            return self.prev()
        if action == "next":
            return self.next()
        if action == "first":
            return self.jump_to(0)
        if action == "last":
            return self.jump_to(len(self._items) - 1)
        return False

    def handle_swipe(self, start_x: float, end_x: float) -> bool:
        """Leftward travel past SWIPE_THRESHOLD goes next, rightward goes prev."""
        if end_x < start_x - SWIPE_THRESHOLD:
            return self.next()
        if end_x > start_x + SWIPE_THRESHOLD:
            return self.prev()
        return False

    def on_animation_complete(self) -> bool:
        transition = self._transition
        if transition is None:
            return False
        return transition.complete()

    async def settle(self) -> bool:
        """Waits for the in-flight transition, bounded by transition_timeout.

        Returns False when the lock had to be force-released.
        """
        transition = self._transition
        if transition is None:
            return True
        self._expire_stale_transition()
        if not transition.resolved:
            with anyio.move_on_after(self._remaining(transition)):
                await transition.wait()
        if not transition.resolved:
            logger.warning(
                "Navigator %s transition to index %s timed out; releasing lock",
                self.id,
                transition.index,
            )
            transition.release()
        return not transition.forced

    def state(self) -> NavigatorState:
        transitioning = self.is_transitioning
        return NavigatorState(
            id=self.id,
            section=self.section,
            activeIndex=self._active_index,
            isTransitioning=transitioning,
            size=len(self._items),
            isEmpty=not self._items,
            activeItem=self.active_item,
            items=list(self._items),
        )

    # ------------------------------
    # Internals
    # ------------------------------
    def _commit(self, index: int) -> bool:
        self._active_index = index
        transition = Transition(index, self._items[index], self._on_transition_resolved, self._clock())
        self._transition = transition
        try:
            self.driver.play(transition.item, transition)
        except Exception:
            logger.exception("Animation driver failed for navigator %s; releasing lock", self.id)
            transition.release()
        return True

    def _on_transition_resolved(self, transition: Transition) -> None:
        if self._transition is transition:
            self._transition = None

    def _remaining(self, transition: Transition) -> Optional[float]:
        if self.transition_timeout is None:
            return None
        elapsed = self._clock() - transition.started_at
        return max(self.transition_timeout - elapsed, 0)

    def _expire_stale_transition(self) -> None:
        transition = self._transition
        if transition is None or self.transition_timeout is None:
            return
        if self._clock() - transition.started_at >= self.transition_timeout:
            logger.warning(
                "Navigator %s transition to index %s exceeded %ss; releasing lock",
                self.id,
                transition.index,
                self.transition_timeout,
            )
            transition.release()
