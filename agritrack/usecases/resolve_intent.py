from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..domain.actions import Action
from ..domain.errors import UnknownIntent
from ..domain.routes import IntentId, NavigationRoutes
from ..domain.screens import ScreenType


@dataclass
class ActionDispatcher:
    """Map an activated control's intent id to the Action bound on a screen."""

    routes: NavigationRoutes

    def resolve(self, screen_type: ScreenType, intent_id: IntentId) -> Action:
        key = str(intent_id)
        action = self.routes.table_for(screen_type).get(key)
        if action is None:
            raise UnknownIntent(screen_type.value, key)
        return action

    def intents_for(self, screen_type: ScreenType) -> List[Tuple[IntentId, Action]]:
        """Return the intents a surface of ``screen_type`` may emit, in order."""
        return list(self.routes.table_for(screen_type).items())

    __call__ = resolve
