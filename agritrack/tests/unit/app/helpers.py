from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from agritrack.app.navigation_controller import NavigationController
from agritrack.domain.actions import DialogKind
from agritrack.domain.routes import DEFAULT_ROUTES, NavigationRoutes
from agritrack.domain.screens import ScreenDescriptor, ScreenType
from agritrack.domain.session import Role, Session


@dataclass(eq=False)
class FakeHandle:
    screen_type: ScreenType
    session: Optional[Session]
    emit: Callable[[str], None]
    disposed: int = 0


@dataclass
class FakeScreens:
    events: List[Tuple[str, Any]] = field(default_factory=list)
    handles: List[FakeHandle] = field(default_factory=list)
    fail_on: Optional[ScreenType] = None
    broken: bool = False

    def create_screen(self, descriptor: ScreenDescriptor, session, emit) -> FakeHandle:
        if self.broken:
            raise RuntimeError("display lost")
        if descriptor.screen_type is self.fail_on:
            self.fail_on = None
            raise RuntimeError("display unavailable")
        handle = FakeHandle(descriptor.screen_type, session, emit)
        self.handles.append(handle)
        self.events.append(("create", descriptor.screen_type))
        return handle

    def dispose(self, handle: FakeHandle) -> None:
        handle.disposed += 1
        self.events.append(("dispose", handle.screen_type))


@dataclass
class FakeNotifier:
    notices: List[Tuple[str, str]] = field(default_factory=list)
    errors: List[Tuple[str, str]] = field(default_factory=list)
    broken: bool = False

    def notify(self, title: str, message: str) -> None:
        if self.broken:
            raise RuntimeError("notice window failed")
        self.notices.append((title, message))

    def error(self, title: str, message: str) -> None:
        if self.broken:
            raise RuntimeError("error window failed")
        self.errors.append((title, message))


@dataclass
class FakePrompter:
    answers: List[Any] = field(default_factory=list)
    prompts: List[Tuple[str, str]] = field(default_factory=list)
    during_prompt: Optional[Callable[[], None]] = None

    def confirm(self, title: str, message: str):
        self.prompts.append((title, message))
        if self.during_prompt is not None:
            hook, self.during_prompt = self.during_prompt, None
            hook()
        return self.answers.pop(0) if self.answers else False


@dataclass
class FakeDialogs:
    opened: List[Tuple[DialogKind, Session]] = field(default_factory=list)
    during_open: Optional[Callable[[], None]] = None
    fail_with: Optional[Exception] = None

    def open_dialog(self, kind: DialogKind, session: Session) -> None:
        if self.during_open is not None:
            hook, self.during_open = self.during_open, None
            hook()
        if self.fail_with is not None:
            raise self.fail_with
        self.opened.append((kind, session))


@dataclass
class FakeProcess:
    terminated: int = 0

    def terminate(self) -> None:
        self.terminated += 1


@dataclass
class Harness:
    controller: NavigationController
    screens: FakeScreens
    notifier: FakeNotifier
    prompter: FakePrompter
    dialogs: FakeDialogs
    process: FakeProcess

    @property
    def active(self) -> FakeHandle:
        return self.controller.state.handle


def make_session(role: Role = Role.ADMIN, user_id: str = "1") -> Session:
    names = {Role.ADMIN: "Admin User", Role.SELLER: "Juan Dela Cruz", Role.BUYER: "John Buyer"}
    return Session(user_id=user_id, display_name=names.get(role, "Someone"), role=role, username="u")


def make_harness(routes: NavigationRoutes = DEFAULT_ROUTES, *, start: bool = True) -> Harness:
    screens = FakeScreens()
    notifier = FakeNotifier()
    prompter = FakePrompter()
    dialogs = FakeDialogs()
    process = FakeProcess()
    controller = NavigationController(
        screens=screens,
        notifier=notifier,
        prompter=prompter,
        dialogs=dialogs,
        process=process,
        routes=routes,
    )
    if start:
        controller.start()
    return Harness(controller, screens, notifier, prompter, dialogs, process)


def logged_in(role: Role = Role.ADMIN) -> Harness:
    harness = make_harness()
    harness.controller.on_authenticated(make_session(role))
    harness.screens.events.clear()
    return harness


__all__ = [
    "FakeDialogs",
    "FakeHandle",
    "FakeNotifier",
    "FakePrompter",
    "FakeProcess",
    "FakeScreens",
    "Harness",
    "logged_in",
    "make_harness",
    "make_session",
]
