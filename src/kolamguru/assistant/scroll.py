"""Scroll synchronization for the live transcript.

Hides the policy that decides when the view is pulled to the newest
message. A user scrolling away detaches the view; any new message, or an
explicit jump, brings it back.
"""

from collections.abc import Callable
from enum import Enum
from typing import Protocol

from .config import DEFAULT_SCROLL_THRESHOLD


class FollowMode(str, Enum):
    """Whether the view tracks the bottom of the transcript."""

    FOLLOWING = "following"
    DETACHED = "detached"


class ScrollViewport(Protocol):
    """The scrollable container the synchronizer drives."""

    def scroll_to_bottom(self) -> None:
        """Move the view to the end of the content."""


StateCallback = Callable[[FollowMode], None]


class ScrollSynchronizer:
    """Two-state machine deciding whether the view follows new content.

    States:
        FOLLOWING: new content keeps the view at the bottom
        DETACHED: the user scrolled away; a "jump to latest" prompt shows

    Example:
        sync = ScrollSynchronizer(threshold=50)
        sync.on_user_scroll(total_height=1000, scroll_top=750, viewport_height=50)
        sync.pending_prompt  # True, 200 units from the bottom
        sync.on_content_changed()
        sync.pending_prompt  # False, new content always wins
    """

    def __init__(
        self,
        threshold: int = DEFAULT_SCROLL_THRESHOLD,
        viewport: ScrollViewport | None = None,
    ) -> None:
        self._threshold = threshold
        self._viewport = viewport
        self._mode = FollowMode.FOLLOWING
        self._state_callback: StateCallback | None = None

    @property
    def mode(self) -> FollowMode:
        """Current follow mode."""
        return self._mode

    @property
    def auto_follow(self) -> bool:
        """True while new content pulls the view to the bottom."""
        return self._mode == FollowMode.FOLLOWING

    @property
    def pending_prompt(self) -> bool:
        """True iff the "new messages below" affordance should show."""
        return self._mode == FollowMode.DETACHED

    @property
    def threshold(self) -> int:
        """Distance from the bottom that still counts as following."""
        return self._threshold

    def set_state_callback(self, callback: StateCallback | None) -> None:
        """Set a callable notified with the mode after every transition."""
        self._state_callback = callback

    def attach(self, viewport: ScrollViewport) -> None:
        """Connect the scroll container."""
        self._viewport = viewport

    def detach(self) -> None:
        """Disconnect the scroll container; scroll requests become no-ops."""
        self._viewport = None

    def distance_from_bottom(
        self, total_height: float, scroll_top: float, viewport_height: float
    ) -> float:
        """How far the bottom of the view is above the end of the content."""
        return total_height - scroll_top - viewport_height

    def on_user_scroll(
        self, total_height: float, scroll_top: float, viewport_height: float
    ) -> FollowMode:
        """Handle a scroll gesture.

        Args:
            total_height: Height of all content
            scroll_top: Offset of the top of the view
            viewport_height: Visible height

        Returns:
            The mode after the transition
        """
        distance = self.distance_from_bottom(total_height, scroll_top, viewport_height)
        if distance > self._threshold:
            self._transition(FollowMode.DETACHED)
        else:
            self._transition(FollowMode.FOLLOWING)
        return self._mode

    def on_content_changed(self) -> None:
        """Handle a transcript append: always follow and scroll down."""
        self._transition(FollowMode.FOLLOWING)
        self._scroll_to_bottom()

    def jump_to_latest(self) -> None:
        """Handle the explicit "jump to latest" action."""
        self._transition(FollowMode.FOLLOWING)
        self._scroll_to_bottom()

    def _scroll_to_bottom(self) -> None:
        if self._viewport is None:
            return
        self._viewport.scroll_to_bottom()

    def _transition(self, mode: FollowMode) -> None:
        self._mode = mode
        if self._state_callback:
            self._state_callback(mode)

    def __repr__(self) -> str:
        return f"ScrollSynchronizer({self._mode.value}, threshold={self._threshold})"
