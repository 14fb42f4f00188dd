# agritrack/app/main.py
from __future__ import annotations

import logging
import os
import tkinter as tk

from ..adapters.auth_demo import DemoAuthenticator
from ..adapters.storage_local import StorageLocal
from ..adapters.tk_host import TkDialogs, TkNotifier, TkProcess, TkPrompter, TkScreenFactory
from ..domain.ports import AuthPort
from ..domain.routes import DEFAULT_ROUTES, validate_routes
from ..usecases.resolve_intent import ActionDispatcher
from ..utils import logging as logging_utils
from ..viewmodels.screen_vm import ScreenVM
from ..viewmodels.settings_vm import SettingsVM
from .navigation_controller import NavigationController, TransitionKind

logging_utils.configure_root()


class App:
    """Bootstrap: settings, Tk root, presentation adapters and navigation."""

    def __init__(self, *, auth: AuthPort | None = None) -> None:
        self._log = logging.getLogger(__name__)

        problems = validate_routes(DEFAULT_ROUTES)
        if problems:
            raise RuntimeError("Invalid navigation routes:\n" + "\n".join(problems))

        # ---- Settings ----
        self._storage = StorageLocal(root_dir=os.environ.get("AGRITRACK_STORAGE_ROOT") or ".")
        self.settings_vm = SettingsVM(on_save=self._storage.save_user_settings)
        self._storage.load_into(self.settings_vm)
        logging_utils.apply_gui_preferences(self.settings_vm.debug_logging)

        # ---- Tk host ----
        self.root = tk.Tk()
        self.root.withdraw()
        self.root.title(self.settings_vm.app_title)

        self._auth: AuthPort = auth or DemoAuthenticator()
        self.screen_vm = ScreenVM(ActionDispatcher(DEFAULT_ROUTES), app_title=self.settings_vm.app_title)
        self._factory = TkScreenFactory(
            self.root,
            self.screen_vm,
            on_login=self._on_login,
            initial_username=lambda: self.settings_vm.last_username,
        )
        self._notifier = TkNotifier(self._factory)
        self.controller = NavigationController(
            screens=self._factory,
            notifier=self._notifier,
            prompter=TkPrompter(self._factory),
            dialogs=TkDialogs(self._factory),
            process=TkProcess(self.root),
            routes=DEFAULT_ROUTES,
        )

    def _on_login(self, username: str, password: str) -> None:
        session = self._auth.authenticate(username, password)
        if session is None:
            self._notifier.error("Login Failed", "Invalid username or password.")
            return
        result = self.controller.on_authenticated(session)
        if result.kind is TransitionKind.NAVIGATED:
            self.settings_vm.record_login(username)
            try:
                self.settings_vm.cmd_save()
            except OSError as exc:
                self._log.warning("Could not persist settings: %s", exc)

    def run(self) -> None:
        self.controller.start()
        try:
            self.root.mainloop()
        finally:
            self._log.info("Shutting down")
            self.root.destroy()


def main() -> None:
    app = App()
    app.run()


if __name__ == "__main__":
    main()
