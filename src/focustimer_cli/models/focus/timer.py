"""Focus timer: countdown clock and session state machine.

FocusTimer owns the single TimerState of a focus session. Hosts drive it
with ``tick()`` once per second and the user commands below, read it through
``snapshot()``, and subscribe to SessionCompleted events to notify the user.

Completion handling is one step: the event is delivered, the counters are
updated and the next session is loaded (paused) before ``tick()`` returns.
Under the flow technique a completed work session instead leaves the timer
waiting for ``resolve_flow_choice()``.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from focustimer_cli.utils.logger import get_logger

from .cycling import apply_transition, next_session_type
from .errors import InvalidTransitionError
from .progress import progress_fraction
from .state import SessionCompleted, TimerSnapshot, TimerState
from .stats import record_completion
from .techniques import (
    DEFAULT_CATALOG,
    FLOW_TECHNIQUE,
    SessionType,
    Technique,
    TechniqueCatalog,
    validate_session_type,
    validate_technique,
)

SessionCompletedListener = Callable[[SessionCompleted], None]


class FocusTimer:
    """Countdown clock with automatic session sequencing."""

    def __init__(
        self,
        technique: str = "classic",
        session_type: str = "work",
        catalog: TechniqueCatalog | None = None,
    ):
        self.catalog = catalog or DEFAULT_CATALOG
        technique = validate_technique(technique)
        session_type = validate_session_type(session_type)

        self._state = TimerState(
            remaining_seconds=self.catalog.duration_seconds(technique, session_type),
            session_type=session_type,
            technique=technique,
        )
        self._listeners: list[SessionCompletedListener] = []
        # Session counter captured when a flow work session completed;
        # None when no flow decision is pending.
        self._pending_flow_count: int | None = None
        self._completing = False
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def remaining_seconds(self) -> int:
        return self._state.remaining_seconds

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def session_type(self) -> SessionType:
        return self._state.session_type

    @property
    def technique(self) -> Technique:
        return self._state.technique

    @property
    def total_sessions(self) -> int:
        return self._state.total_sessions

    @property
    def streak(self) -> int:
        return self._state.streak

    @property
    def flow_skipped_breaks(self) -> int:
        return self._state.flow_skipped_breaks

    @property
    def awaiting_flow_choice(self) -> bool:
        """True while a flow work session waits for resolve_flow_choice()."""
        return self._pending_flow_count is not None

    @property
    def duration_seconds(self) -> int:
        """Full length of the current session in seconds."""
        return self.catalog.duration_seconds(
            self._state.technique, self._state.session_type
        )

    def progress(self) -> float:
        """Fraction of the current session already elapsed."""
        return progress_fraction(
            self._state.technique,
            self._state.session_type,
            self._state.remaining_seconds,
            self.catalog,
        )

    def snapshot(self) -> TimerSnapshot:
        """Get a read-only copy of the current state."""
        with self._lock:
            state = self._state
            return TimerSnapshot(
                remaining_seconds=state.remaining_seconds,
                running=state.running,
                session_type=state.session_type,
                technique=state.technique,
                total_sessions=state.total_sessions,
                streak=state.streak,
                flow_skipped_breaks=state.flow_skipped_breaks,
                awaiting_flow_choice=self.awaiting_flow_choice,
                progress=self.progress(),
            )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def subscribe(self, listener: SessionCompletedListener) -> Callable[[], None]:
        """Register a SessionCompleted listener.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: SessionCompleted) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                # A failing notifier never blocks the state machine
                get_logger().exception(
                    "session completed listener %r failed for %s/%s",
                    listener,
                    event.technique,
                    event.session_type,
                )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def tick(self) -> SessionCompleted | None:
        """Advance the countdown by one second.

        Returns the SessionCompleted event when this tick finished the
        session, otherwise None.

        Raises:
            InvalidTransitionError: If the timer is not running.
        """
        with self._lock:
            self._check_not_completing("tick")
            state = self._state
            if not state.running:
                raise InvalidTransitionError("Cannot tick while the timer is paused")

            if state.remaining_seconds > 0:
                state.remaining_seconds -= 1
            if state.remaining_seconds == 0:
                return self._complete()
            return None

    def toggle_running(self) -> bool:
        """Start or pause the countdown. Returns the new running flag.

        Raises:
            InvalidTransitionError: While a flow decision is pending.
        """
        with self._lock:
            self._check_not_completing("toggle_running")
            if self.awaiting_flow_choice:
                raise InvalidTransitionError(
                    "Cannot start the timer while a flow decision is pending"
                )
            self._state.running = not self._state.running
            get_logger().debug(
                "timer %s at %ss (%s)",
                "started" if self._state.running else "paused",
                self._state.remaining_seconds,
                self._state.session_type,
            )
            return self._state.running

    def start(self) -> None:
        """Start the countdown; no-op if already running."""
        with self._lock:
            if not self._state.running:
                self.toggle_running()

    def pause(self) -> None:
        """Pause the countdown; no-op if already paused."""
        with self._lock:
            if self._state.running:
                self.toggle_running()

    def reset(self) -> None:
        """Reload the current session at full duration, paused.

        A pending flow decision is resolved as "take the break" first.
        Counters are not touched.
        """
        with self._lock:
            self._check_not_completing("reset")
            self._decline_pending_flow()
            state = self._state
            state.remaining_seconds = self.duration_seconds
            state.running = False
            get_logger().debug(
                "timer reset to %ss (%s)", state.remaining_seconds, state.session_type
            )

    def switch_session_type(self, session_type: str) -> None:
        """Switch to another session type, discarding the current countdown."""
        session_type = validate_session_type(session_type)
        with self._lock:
            self._check_not_completing("switch_session_type")
            self._decline_pending_flow()
            apply_transition(self._state, session_type, self.catalog)
            get_logger().info("switched session type to %s", session_type)

    def switch_technique(self, technique: str) -> None:
        """Switch technique, reloading the current session type's duration."""
        technique = validate_technique(technique)
        with self._lock:
            self._check_not_completing("switch_technique")
            self._decline_pending_flow()
            state = self._state
            if technique != state.technique:
                state.flow_skipped_breaks = 0
            state.technique = technique
            state.remaining_seconds = self.duration_seconds
            state.running = False
            get_logger().info("switched technique to %s", technique)

    def resolve_flow_choice(self, continue_in_flow: bool) -> None:
        """Answer the pending flow decision.

        ``True`` skips the break and loads another work session;
        ``False`` moves on to the break as any other technique would.

        Raises:
            InvalidTransitionError: If no flow decision is pending.
        """
        with self._lock:
            self._check_not_completing("resolve_flow_choice")
            if not self.awaiting_flow_choice:
                raise InvalidTransitionError("No flow decision is pending")

            if continue_in_flow:
                self._pending_flow_count = None
                state = self._state
                state.flow_skipped_breaks += 1
                state.remaining_seconds = self.catalog.duration_seconds(
                    FLOW_TECHNIQUE, "work"
                )
                state.running = False
                get_logger().info(
                    "flow continued, %d break(s) skipped", state.flow_skipped_breaks
                )
            else:
                self._decline_pending_flow()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_not_completing(self, command: str) -> None:
        if self._completing:
            raise InvalidTransitionError(
                f"Cannot {command} while a session completion is being processed"
            )

    def _complete(self) -> SessionCompleted:
        state = self._state
        state.running = False
        completed_type = state.session_type
        completed_count = state.total_sessions
        event = SessionCompleted(session_type=completed_type, technique=state.technique)

        get_logger().info("%s session completed (%s)", completed_type, state.technique)
        self._completing = True
        try:
            self._emit(event)
        finally:
            # Runs even when a listener raises KeyboardInterrupt or SystemExit,
            # so the countdown can never complete twice.
            self._completing = False
            record_completion(state, completed_type)

            if state.technique == FLOW_TECHNIQUE and completed_type == "work":
                self._pending_flow_count = completed_count
                get_logger().info("waiting for flow decision")
            else:
                self._advance(completed_type, completed_count)
        return event

    def _decline_pending_flow(self) -> None:
        if self._pending_flow_count is None:
            return
        completed_count = self._pending_flow_count
        self._pending_flow_count = None
        self._advance("work", completed_count)

    def _advance(self, completed_type: SessionType, completed_count: int) -> None:
        next_type = next_session_type(completed_type, completed_count)
        apply_transition(self._state, next_type, self.catalog)
        get_logger().info("next session: %s", next_type)
