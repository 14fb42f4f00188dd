from __future__ import annotations

from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[3]
CLIENT_ROOT = PROJECT_ROOT / "agritrack"
VIEWS_ROOT = CLIENT_ROOT / "app" / "views"


def find_needle(needle: str, files: list[Path]) -> list[str]:
    matches: list[str] = []
    for file_path in files:
        text = file_path.read_text(encoding="utf-8")
        if needle not in text:
            continue
        for line_no, line in enumerate(text.splitlines(), start=1):
            if needle in line:
                rel_path = file_path.relative_to(PROJECT_ROOT)
                matches.append(f"{rel_path}:{line_no}: {line.strip()}")
    return matches


@pytest.mark.parametrize(
    "needle",
    [
        "NavigationController",
        "DEFAULT_ROUTES",
        "ActionName",
        "navigation_controller",
    ],
)
def test_views_do_not_decide_navigation(needle: str) -> None:
    files = sorted(VIEWS_ROOT.rglob("*.py"))
    assert files, "views package missing; adjust test if structure changes."
    matches = find_needle(needle, files)
    assert not matches, f"Views must only emit intent ids, found '{needle}':\n" + "\n".join(matches)


@pytest.mark.parametrize("relative", [("domain",), ("usecases",), ("viewmodels",)])
def test_core_layers_do_not_import_tkinter(relative: tuple[str, ...]) -> None:
    files = sorted(CLIENT_ROOT.joinpath(*relative).rglob("*.py"))
    matches = find_needle("tkinter", files)
    assert not matches, "Tk must stay in app/views and adapters:\n" + "\n".join(matches)
