"""Navigation and session-lifecycle controller for the desktop shell.

The controller owns the single active top-level screen. Screen surfaces report
intents through ``on_intent``; the upstream login step reports a new session
through ``on_authenticated``. Each call is resolved into one outcome:
an in-place dialog, an informational notice, a screen replacement, a logout
back to the login screen, or process termination.

Calls are serialized through one FIFO queue. A call that arrives while a
transition is still running (for example from Tk's nested event loop while a
confirmation prompt is open) is queued and processed once the running
transition has completed.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Any, Callable, Deque, Dict, Optional, Tuple

from ..domain.actions import Action
from ..domain.errors import (
    ForbiddenTransition,
    ScreenCreationFailed,
    UnknownIntent,
    UnsupportedRole,
)
from ..domain.navigation import NavigationState, NavPhase
from ..domain.ports import (
    DialogPort,
    EmitFn,
    NotifierPort,
    ProcessPort,
    PrompterPort,
    ScreenFactoryPort,
    ScreenHandle,
)
from ..domain.routes import DEFAULT_ROUTES, IntentId, NavigationRoutes
from ..domain.screens import ScreenDescriptor, ScreenType
from ..domain.session import Session
from ..usecases.confirmation_gate import ConfirmationGate, GateOutcome
from ..usecases.error_mapping import map_navigation_error
from ..usecases.resolve_intent import ActionDispatcher

_UNBOUND = object()


class TransitionKind(str, Enum):
    NAVIGATED = "navigated"
    DIALOG = "dialog"
    NOTIFIED = "notified"
    CANCELLED = "cancelled"
    LOGGED_OUT = "logged_out"
    TERMINATED = "terminated"
    REJECTED = "rejected"
    IGNORED = "ignored"
    QUEUED = "queued"


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of one inbound call.

    Attributes:
        kind: What the controller did.
        action: Resolved action, when the call was an intent.
        error: Contained or user-visible error, if any.
        state: Navigation state after the call (None for queued calls).
    """

    kind: TransitionKind
    action: Optional[Action] = None
    error: Optional[Exception] = None
    state: Optional[NavigationState] = None


class NavigationController:
    """Resolve intents into transitions while keeping one active screen."""

    def __init__(
        self,
        *,
        screens: ScreenFactoryPort,
        notifier: NotifierPort,
        prompter: PrompterPort,
        dialogs: Optional[DialogPort] = None,
        process: Optional[ProcessPort] = None,
        routes: NavigationRoutes = DEFAULT_ROUTES,
    ) -> None:
        """Wire presentation capabilities and the route tables.

        Args:
            screens: Creates and disposes top-level screen surfaces.
            notifier: Shows informational and error notices.
            prompter: Answers yes/no confirmation prompts.
            dialogs: Opens in-place dialogs; without it dialog actions are
                reported as unavailable.
            process: Ends the host process on a confirmed exit.
            routes: Per-screen dispatch tables and role dashboards.
        """
        self._log = logging.getLogger(__name__)
        self._screens = screens
        self._notifier = notifier
        self._dialogs = dialogs
        self._process = process
        self.routes = routes
        self.dispatcher = ActionDispatcher(routes)
        self.gate = ConfirmationGate(prompter)

        self._state: Optional[NavigationState] = None
        self._lock = threading.Lock()
        self._pending: Deque[Callable[[], TransitionResult]] = deque()
        self._draining = False

    # ------------------------------------------------------------------
    # Public surface
    # ------------------------------------------------------------------
    @property
    def state(self) -> Optional[NavigationState]:
        """Current immutable navigation snapshot (None before ``start``)."""
        return self._state

    def start(self) -> NavigationState:
        """Create the login screen and enter the initial OnLogin state."""
        if self._state is not None:
            raise RuntimeError("Navigation controller already started.")
        login = self.routes.descriptor(ScreenType.LOGIN)
        self._state = self._open(login, None)
        self._log.info("Navigation started on %s", self._state.describe())
        return self._state

    def on_authenticated(self, session: Session) -> TransitionResult:
        """Enter the dashboard registered for ``session.role``."""
        return self._submit(partial(self._authenticate, session))

    def on_intent(self, intent_id: IntentId, source: Any = None) -> TransitionResult:
        """Handle an intent reported by a screen surface.

        Args:
            intent_id: Opaque id of the activated control.
            source: Handle of the emitting surface. Intents from a surface that
                is no longer active are dropped; ``None`` skips the check.
        """
        return self._submit(partial(self._handle_intent, intent_id, source))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def _submit(self, job: Callable[[], TransitionResult]) -> TransitionResult:
        with self._lock:
            self._pending.append(job)
            if self._draining:
                self._log.debug("Transition in progress; queued call (%d pending)", len(self._pending))
                return TransitionResult(TransitionKind.QUEUED)
            self._draining = True

        own = TransitionResult(TransitionKind.QUEUED)
        try:
            while True:
                with self._lock:
                    if not self._pending:
                        self._draining = False
                        break
                    next_job = self._pending.popleft()
                result = self._run(next_job)
                if next_job is job:
                    own = result
        except BaseException:
            with self._lock:
                dropped = len(self._pending)
                self._pending.clear()
                self._draining = False
            self._log.warning("Navigation interrupted; dropped %d queued call(s)", dropped)
            raise
        return own

    def _run(self, job: Callable[[], TransitionResult]) -> TransitionResult:
        try:
            return job()
        except Exception as exc:
            self._log.exception("Navigation call failed on %s", self._describe_state())
            return TransitionResult(TransitionKind.REJECTED, error=exc, state=self._state)

    def _describe_state(self) -> str:
        return self._state.describe() if self._state is not None else "not started"

    # ------------------------------------------------------------------
    # Jobs
    # ------------------------------------------------------------------
    def _authenticate(self, session: Session) -> TransitionResult:
        state = self._state
        if state is None or state.terminated:
            self._log.warning("Ignoring login: navigation is not running")
            return TransitionResult(TransitionKind.IGNORED, state=state)
        if state.phase is not NavPhase.ON_LOGIN:
            exc = ForbiddenTransition(
                f"Login reported while on {state.describe()}; logout first."
            )
            self._log.error("Ignoring login: %s", exc)
            return TransitionResult(TransitionKind.IGNORED, error=exc, state=state)

        dashboard = self.routes.dashboard_for(session.role)
        if dashboard is None or not dashboard.admits(session):
            exc = UnsupportedRole(getattr(session.role, "value", session.role))
            self._log.warning("Login for user %s rejected: %s", session.user_id, exc)
            self._show_error(*map_navigation_error(exc))
            return TransitionResult(TransitionKind.REJECTED, error=exc, state=state)

        self._log.info("User %s logged in as %s", session.user_id, session.role_name)
        return self._replace(dashboard, session, None, TransitionKind.NAVIGATED)

    def _handle_intent(self, intent_id: IntentId, source: Any) -> TransitionResult:
        state = self._state
        if state is None or state.terminated:
            self._log.warning("Ignoring intent %r: navigation is not running", intent_id)
            return TransitionResult(TransitionKind.IGNORED, state=state)
        if source is not None and source is not state.handle:
            self._log.debug("Dropping intent %r from an inactive surface", intent_id)
            return TransitionResult(TransitionKind.IGNORED, state=state)

        try:
            action = self.dispatcher.resolve(state.screen_type, intent_id)
        except UnknownIntent as exc:
            self._log.warning("Ignoring intent: %s", exc)
            return TransitionResult(TransitionKind.IGNORED, error=exc, state=state)
        self._log.debug("Intent %r on %s -> %s", intent_id, state.describe(), action.name.value)
        return self._apply(state, action)

    def _apply(self, state: NavigationState, action: Action) -> TransitionResult:
        if action.destructive:
            if self.gate.guard(action) is GateOutcome.CANCELLED:
                self._log.info("%s cancelled on %s", action.name.value, state.describe())
                return TransitionResult(TransitionKind.CANCELLED, action=action, state=state)
            if action.terminates_process:
                return self._terminate(state, action)
            return self._logout(state, action)

        if action.dialog is not None:
            return self._open_dialog(state, action)

        if action.is_unimplemented:
            return self._notify_unimplemented(state, action, action.notice)

        try:
            target = self._resolve_target(state, action)
        except ForbiddenTransition as exc:
            self._log.error("Refusing %s: %s", action.name.value, exc)
            return TransitionResult(TransitionKind.IGNORED, action=action, error=exc, state=state)
        if not target.implemented:
            return self._notify_unimplemented(state, action, f"{target.title} - To be implemented")
        return self._replace(target, state.session, action, TransitionKind.NAVIGATED)

    # ------------------------------------------------------------------
    # Outcomes
    # ------------------------------------------------------------------
    def _resolve_target(self, state: NavigationState, action: Action) -> ScreenDescriptor:
        session = state.session
        if session is None:
            raise ForbiddenTransition(f"{action.name.value} requires an authenticated session.")
        if action.home:
            target = self.routes.dashboard_for(session.role)
            if target is None:
                raise ForbiddenTransition(f"No dashboard to return to for role {session.role_name}.")
        else:
            target = self.routes.descriptor(action.target)
        if not target.admits(session):
            raise ForbiddenTransition(
                f"Role {session.role_name} may not open {target.screen_type.value}."
            )
        return target

    def _open_dialog(self, state: NavigationState, action: Action) -> TransitionResult:
        if state.session is None:
            exc = ForbiddenTransition(f"{action.name.value} requires an authenticated session.")
            self._log.error("Refusing %s: %s", action.name.value, exc)
            return TransitionResult(TransitionKind.IGNORED, action=action, error=exc, state=state)
        if self._dialogs is None:
            return self._notify_unimplemented(state, action, f"{action.label} - Not available")
        self._log.info("Opening %s dialog for %s", action.dialog.value, state.session.user_id)
        try:
            self._dialogs.open_dialog(action.dialog, state.session)
        except Exception as exc:
            self._log.exception("Opening %s dialog failed", action.dialog.value)
            self._show_error(*map_navigation_error(exc, default_message=f"Could not open {action.label}."))
            return TransitionResult(TransitionKind.REJECTED, action=action, error=exc, state=state)
        return TransitionResult(TransitionKind.DIALOG, action=action, state=state)

    def _notify_unimplemented(
        self, state: NavigationState, action: Action, message: str
    ) -> TransitionResult:
        text = message or f"{action.label} - To be implemented"
        self._log.info("%s is not implemented; notifying user", action.name.value)
        try:
            self._notifier.notify("Info", text)
        except Exception:
            self._log.exception("Showing notice %r failed", text)
        return TransitionResult(TransitionKind.NOTIFIED, action=action, state=state)

    def _logout(self, state: NavigationState, action: Action) -> TransitionResult:
        self._log.info("Session for %s ended", state.session.user_id if state.session else "anonymous")
        login = self.routes.descriptor(ScreenType.LOGIN)
        return self._replace(login, None, action, TransitionKind.LOGGED_OUT)

    def _terminate(self, state: NavigationState, action: Action) -> TransitionResult:
        self._release(state.handle)
        self._state = NavigationState(state.screen, None, None, terminated=True)
        self._log.info("Process termination requested from %s", state.describe())
        if self._process is not None:
            self._process.terminate()
        else:
            self._log.warning("No process port configured; host must exit on its own")
        return TransitionResult(TransitionKind.TERMINATED, action=action, state=self._state)

    def _replace(
        self,
        target: ScreenDescriptor,
        session: Optional[Session],
        action: Optional[Action],
        kind: TransitionKind,
    ) -> TransitionResult:
        previous = self._state
        self._release(previous.handle)
        try:
            self._state = self._open(target, session)
        except Exception as exc:
            return self._recover(previous, target, action, exc)
        self._log.info("%s -> %s", previous.describe(), self._state.describe())
        return TransitionResult(kind, action=action, state=self._state)

    def _recover(
        self,
        previous: NavigationState,
        target: ScreenDescriptor,
        action: Optional[Action],
        exc: Exception,
    ) -> TransitionResult:
        error = ScreenCreationFailed(str(exc) or type(exc).__name__)
        self._log.exception(
            "Creating %s failed after leaving %s; returning to login",
            target.screen_type.value,
            previous.describe(),
        )
        self._show_error(*map_navigation_error(error))
        try:
            self._state = self._open(self.routes.descriptor(ScreenType.LOGIN), None)
        except Exception:
            # Nothing can be rendered; the previous handle is already gone.
            self._state = NavigationState(previous.screen, None, None, terminated=True)
            self._log.critical("Login fallback failed; navigation stopped")
            raise
        return TransitionResult(TransitionKind.REJECTED, action=action, error=error, state=self._state)

    def _show_error(self, title: str, message: str) -> None:
        try:
            self._notifier.error(title, message)
        except Exception:
            self._log.exception("Showing error %r failed", title)

    # ------------------------------------------------------------------
    # Surface lifecycle
    # ------------------------------------------------------------------
    def _open(self, descriptor: ScreenDescriptor, session: Optional[Session]) -> NavigationState:
        emit, binding = self._make_emitter()
        handle = self._screens.create_screen(descriptor, session, emit)
        binding["handle"] = handle
        return NavigationState(descriptor, handle, session)

    def _make_emitter(self) -> Tuple[EmitFn, Dict[str, Any]]:
        binding: Dict[str, Any] = {"handle": _UNBOUND}

        def emit(intent_id: IntentId) -> None:
            self.on_intent(intent_id, source=binding["handle"])

        return emit, binding

    def _release(self, handle: ScreenHandle) -> None:
        if handle is None:
            return
        try:
            self._screens.dispose(handle)
        except Exception:
            self._log.exception("Disposing screen surface failed")


__all__ = ["NavigationController", "TransitionKind", "TransitionResult"]
