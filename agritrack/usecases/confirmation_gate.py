from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..domain.actions import Action, Prompt
from ..domain.ports import PrompterPort


class GateOutcome(str, Enum):
    PROCEED = "proceed"
    CANCELLED = "cancelled"


@dataclass
class ConfirmationGate:
    """Require an explicit "yes" before a destructive action may proceed."""

    prompter: PrompterPort

    def guard(self, action: Action, prompt: Optional[Prompt] = None) -> GateOutcome:
        if not action.destructive:
            return GateOutcome.PROCEED
        prompt = prompt or action.prompt
        if prompt is None:
            raise ValueError(f"Destructive action {action.name.value} has no prompt.")
        try:
            answer = self.prompter.confirm(prompt.title, prompt.message)
        except Exception:
            logging.getLogger(__name__).exception(
                "Confirmation prompt for %s failed; treating as cancelled", action.name.value
            )
            return GateOutcome.CANCELLED
        # Dismissed dialogs report None; only a literal yes proceeds.
        if answer is True:
            return GateOutcome.PROCEED
        return GateOutcome.CANCELLED

    __call__ = guard


__all__ = ["ConfirmationGate", "GateOutcome"]
