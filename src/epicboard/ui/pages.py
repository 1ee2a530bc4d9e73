"""
Page behaviour — turn one line of input into an Action, and draw a page.

Pages are plain frames (see :mod:`epicboard.ui.navigator`); the functions
here read the shared :class:`TrackerDatabase` to validate ids before an
Action is emitted, so the Navigator never has to.

Key bindings::

    Home          q quit · n new epic · <id> view epic
    Epic detail   b back · u status · r rename · e edit description ·
                  d delete · n new story · <id> view story
    Story detail  b back · u status · r rename · e edit description · d delete
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from epicboard.core.constants import MAX_DESCRIPTION_LENGTH, MAX_NAME_LENGTH
from epicboard.core.exceptions import EpicNotFoundError
from epicboard.core.store.database import TrackerDatabase
from epicboard.ui.actions import (
    Action,
    CreateEpic,
    CreateStory,
    DeleteEpic,
    DeleteStory,
    Exit,
    NavigateToEpicDetail,
    NavigateToPreviousPage,
    NavigateToStoryDetail,
    UpdateEpicDescription,
    UpdateEpicName,
    UpdateEpicStatus,
    UpdateStoryDescription,
    UpdateStoryName,
    UpdateStoryStatus,
)
from epicboard.ui.format import constrain_text, status_text
from epicboard.ui.navigator import EpicDetailPage, HomePage, Page, StoryDetailPage

HOME_MENU = ("(q) quit", "(n) new epic", "<ID> view epic")
EPIC_MENU = (
    "(b) back",
    "(u) status",
    "(r) rename",
    "(e) edit description",
    "(d) delete",
    "(n) new story",
    "<ID> view story",
)
STORY_MENU = ("(b) back", "(u) status", "(r) rename", "(e) edit description", "(d) delete")


# ---------------------------------------------------------------------------
# Input → Action
# ---------------------------------------------------------------------------


def action_from(page: Page, text: str, db: TrackerDatabase) -> Action | None:
    """Translate one line of input on ``page``. Unknown input gives ``None``."""
    key = text.strip().lower()

    if isinstance(page, HomePage):
        if key == "q":
            return Exit()
        if key == "n":
            return CreateEpic()
        epic_id = _parse_id(key)
        if epic_id is not None and epic_id in db.read().epics:
            return NavigateToEpicDetail(epic_id=epic_id)
        return None

    if isinstance(page, EpicDetailPage):
        epic_id = page.epic_id
        simple: dict[str, Action] = {
            "b": NavigateToPreviousPage(),
            "u": UpdateEpicStatus(epic_id=epic_id),
            "r": UpdateEpicName(epic_id=epic_id),
            "e": UpdateEpicDescription(epic_id=epic_id),
            "d": DeleteEpic(epic_id=epic_id),
            "n": CreateStory(epic_id=epic_id),
        }
        if key in simple:
            return simple[key]
        story_id = _parse_id(key)
        if story_id is None:
            return None
        epic = db.read().epics.get(epic_id)
        if epic is not None and story_id in epic.story_ids:
            return NavigateToStoryDetail(story_id=story_id, epic_id=epic_id)
        return None

    if isinstance(page, StoryDetailPage):
        story_id = page.story_id
        simple = {
            "b": NavigateToPreviousPage(),
            "u": UpdateStoryStatus(story_id=story_id),
            "r": UpdateStoryName(story_id=story_id),
            "e": UpdateStoryDescription(story_id=story_id),
            "d": DeleteStory(story_id=story_id, epic_id=page.epic_id),
        }
        return simple.get(key)

    raise TypeError(f"Unknown page: {page!r}")


def _parse_id(key: str) -> int | None:
    return int(key) if key.isascii() and key.isdigit() else None


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render(
    page: Page,
    db: TrackerDatabase,
    console: Console,
    max_name_length: int = MAX_NAME_LENGTH,
    max_description_length: int = MAX_DESCRIPTION_LENGTH,
) -> None:
    """Draw ``page`` and its menu. Raises NotFound errors for vanished ids."""
    if isinstance(page, HomePage):
        _render_home(db, console)
        menu = HOME_MENU
    elif isinstance(page, EpicDetailPage):
        _render_epic(page, db, console, max_name_length, max_description_length)
        menu = EPIC_MENU
    elif isinstance(page, StoryDetailPage):
        _render_story(page, db, console, max_name_length, max_description_length)
        menu = STORY_MENU
    else:
        raise TypeError(f"Unknown page: {page!r}")

    console.print()
    console.print(_menu_table(menu))


def _render_home(db: TrackerDatabase, console: Console) -> None:
    state = db.read()
    if not state.epics:
        console.print("\n  There are no epics. Create a new epic with [cyan]n[/cyan].")
        return

    table = Table(title=f"Epics ({len(state.epics)})", title_justify="left", box=box.ROUNDED)
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Status")
    for epic_id in sorted(state.epics):
        epic = state.epics[epic_id]
        table.add_row(str(epic_id), Text(epic.name), status_text(epic.status))
    console.print(table)


def _render_epic(
    page: EpicDetailPage,
    db: TrackerDatabase,
    console: Console,
    max_name_length: int,
    max_description_length: int,
) -> None:
    state = db.read()
    epic = state.epics.get(page.epic_id)
    if epic is None:
        raise EpicNotFoundError(page.epic_id)

    header = Table(
        title=f"Epic #{page.epic_id} ({status_text(epic.status).markup})",
        title_justify="left",
        box=box.ROUNDED,
    )
    header.add_column("Name")
    header.add_column("Description")
    header.add_row(
        Text(constrain_text(epic.name, max_name_length)),
        Text(constrain_text(epic.description, max_description_length)),
    )
    console.print(header)

    if not epic.story_ids:
        console.print("\n  This epic has no stories.")
        return

    stories = Table(
        title=f"Stories ({len(epic.story_ids)} total)", title_justify="left", box=box.ROUNDED
    )
    stories.add_column("ID", justify="right")
    stories.add_column("Name")
    stories.add_column("Status")
    for story_id in sorted(epic.story_ids):
        story = state.stories.get(story_id)
        if story is None:
            continue
        stories.add_row(
            str(story_id),
            Text(constrain_text(story.name, max_name_length)),
            status_text(story.status),
        )
    console.print(stories)


def _render_story(
    page: StoryDetailPage,
    db: TrackerDatabase,
    console: Console,
    max_name_length: int,
    max_description_length: int,
) -> None:
    story = db.get_story(page.story_id)

    table = Table(
        title=f"Story #{page.story_id} ({status_text(story.status).markup})",
        title_justify="left",
        box=box.ROUNDED,
    )
    table.add_column("Name")
    table.add_column("Description")
    table.add_row(
        Text(constrain_text(story.name, max_name_length)),
        Text(constrain_text(story.description, max_description_length)),
    )
    console.print(table)


def _menu_table(options: tuple[str, ...]) -> Table:
    menu = Table(show_header=False, box=box.ROUNDED)
    for _ in options:
        menu.add_column(justify="center")
    menu.add_row(*options)
    return menu
