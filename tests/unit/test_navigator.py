"""Unit tests for epicboard.ui.navigator — page stack and action dispatch."""

from __future__ import annotations

import pytest

from epicboard.core.exceptions import EpicNotFoundError, StoryNotFoundError
from epicboard.core.models import DatabaseState, Epic, Status, Story
from epicboard.core.store import MemoryStorage, TrackerDatabase
from epicboard.ui.actions import (
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
from epicboard.ui.navigator import EpicDetailPage, HomePage, Navigator, StoryDetailPage
from epicboard.ui.prompts import ScriptedPrompts


def _state() -> DatabaseState:
    """Epic 1 owns one Closed story 5; epic 2 owns an Open story 3 and a Resolved story 4."""
    return DatabaseState(
        last_item_id=5,
        epics={
            1: Epic(name="Closed epic", description="d", status=Status.CLOSED, story_ids=[5]),
            2: Epic(name="Busy epic", description="d", status=Status.IN_PROGRESS, story_ids=[3, 4]),
        },
        stories={
            3: Story(name="open", description="d"),
            4: Story(name="resolved", description="d", status=Status.RESOLVED),
            5: Story(name="closed", description="d", status=Status.CLOSED),
        },
    )


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage(_state())


@pytest.fixture
def db(storage: MemoryStorage) -> TrackerDatabase:
    return TrackerDatabase(storage)


def _nav(db: TrackerDatabase, **answers) -> Navigator:
    return Navigator(db, ScriptedPrompts(**answers))


# ---------------------------------------------------------------------------
# Page stack
# ---------------------------------------------------------------------------


class TestPageStack:
    def test_starts_on_home(self, db: TrackerDatabase) -> None:
        nav = _nav(db)
        assert nav.current_page == HomePage()
        assert nav.page_count == 1

    def test_navigate_down_and_back(self, db: TrackerDatabase) -> None:
        nav = _nav(db)
        nav.dispatch(NavigateToEpicDetail(epic_id=2))
        nav.dispatch(NavigateToStoryDetail(story_id=3, epic_id=2))
        assert nav.pages == (HomePage(), EpicDetailPage(2), StoryDetailPage(3, 2))

        nav.dispatch(NavigateToPreviousPage())
        assert nav.current_page == EpicDetailPage(2)
        nav.dispatch(NavigateToPreviousPage())
        assert nav.current_page == HomePage()

    def test_back_on_home_is_a_no_op(self, db: TrackerDatabase) -> None:
        nav = _nav(db)
        nav.dispatch(NavigateToPreviousPage())
        nav.dispatch(NavigateToPreviousPage())
        assert nav.pages == (HomePage(),)

    def test_back_stops_at_home(self, db: TrackerDatabase) -> None:
        nav = _nav(db)
        nav.dispatch(NavigateToEpicDetail(epic_id=2))
        for _ in range(3):
            nav.dispatch(NavigateToPreviousPage())
        assert nav.pages == (HomePage(),)

    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_exit_from_any_depth(self, db: TrackerDatabase, depth: int) -> None:
        nav = _nav(db)
        if depth >= 2:
            nav.dispatch(NavigateToEpicDetail(epic_id=1))
        if depth >= 3:
            nav.dispatch(NavigateToStoryDetail(story_id=5, epic_id=1))
        assert nav.page_count == depth

        nav.dispatch(Exit())
        assert nav.page_count == 0
        assert nav.current_page is None

    def test_unknown_action(self, db: TrackerDatabase) -> None:
        with pytest.raises(TypeError):
            _nav(db).dispatch("not an action")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Create / update
# ---------------------------------------------------------------------------


class TestCreateAndUpdate:
    def test_create_epic(self, db: TrackerDatabase) -> None:
        nav = _nav(db, create_epic=[Epic(name="New", description="d")])
        nav.dispatch(CreateEpic())
        assert db.read().epics[6].name == "New"
        assert nav.page_count == 1

    def test_create_epic_cancelled(self, db: TrackerDatabase, storage: MemoryStorage) -> None:
        nav = _nav(db, create_epic=[None])
        nav.dispatch(CreateEpic())
        assert storage.write_count == 0

    def test_create_story(self, db: TrackerDatabase) -> None:
        nav = _nav(db, create_story=[Story(name="New", description="d")])
        nav.dispatch(CreateStory(epic_id=2))
        assert db.read().epics[2].story_ids == [3, 4, 6]

    def test_create_story_missing_epic_propagates(self, db: TrackerDatabase) -> None:
        nav = _nav(db, create_story=[Story(name="New", description="d")])
        nav.dispatch(NavigateToEpicDetail(epic_id=9))
        with pytest.raises(EpicNotFoundError):
            nav.dispatch(CreateStory(epic_id=9))
        assert nav.page_count == 2

    def test_rename_and_describe(self, db: TrackerDatabase) -> None:
        nav = _nav(
            db,
            update_name=["Epic name", "Story name"],
            update_description=["Epic text", None],
        )
        nav.dispatch(UpdateEpicName(epic_id=1))
        nav.dispatch(UpdateEpicDescription(epic_id=1))
        nav.dispatch(UpdateStoryName(story_id=5))
        nav.dispatch(UpdateStoryDescription(story_id=5))

        state = db.read()
        assert state.epics[1].name == "Epic name"
        assert state.epics[1].description == "Epic text"
        assert state.stories[5].name == "Story name"
        assert state.stories[5].description == "d"

    def test_epic_status_set_directly(self, db: TrackerDatabase) -> None:
        nav = _nav(db, update_status=[Status.OPEN])
        nav.dispatch(UpdateEpicStatus(epic_id=1))
        assert db.read().epics[1].status is Status.OPEN
        # epic status changes never touch stories
        assert db.read().stories[5].status is Status.CLOSED

    def test_story_status_rolls_up(self, db: TrackerDatabase) -> None:
        nav = _nav(db, update_status=[Status.CLOSED])
        nav.dispatch(UpdateStoryStatus(story_id=3))
        state = db.read()
        assert state.stories[3].status is Status.CLOSED
        # stories are now Closed + Resolved
        assert state.epics[2].status is Status.RESOLVED

    def test_story_status_cancelled(self, db: TrackerDatabase, storage: MemoryStorage) -> None:
        nav = _nav(db, update_status=[None])
        nav.dispatch(UpdateStoryStatus(story_id=3))
        assert storage.write_count == 0

    def test_story_status_missing_story(self, db: TrackerDatabase) -> None:
        nav = _nav(db, update_status=[Status.CLOSED])
        with pytest.raises(StoryNotFoundError):
            nav.dispatch(UpdateStoryStatus(story_id=99))


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------


class TestDelete:
    def test_delete_story_rolls_up_and_pops(self, db: TrackerDatabase) -> None:
        nav = _nav(db, confirm_delete_story=[True])
        nav.dispatch(NavigateToEpicDetail(epic_id=1))
        nav.dispatch(NavigateToStoryDetail(story_id=5, epic_id=1))

        nav.dispatch(DeleteStory(story_id=5, epic_id=1))

        state = db.read()
        assert 5 not in state.stories
        assert state.epics[1].story_ids == []
        assert state.epics[1].status is Status.OPEN
        assert nav.current_page == EpicDetailPage(1)

    def test_delete_story_declined(self, db: TrackerDatabase, storage: MemoryStorage) -> None:
        nav = _nav(db, confirm_delete_story=[False])
        nav.dispatch(NavigateToEpicDetail(epic_id=1))
        nav.dispatch(NavigateToStoryDetail(story_id=5, epic_id=1))

        nav.dispatch(DeleteStory(story_id=5, epic_id=1))

        assert storage.write_count == 0
        assert nav.page_count == 3

    def test_delete_story_wrong_epic_keeps_page(self, db: TrackerDatabase) -> None:
        nav = _nav(db, confirm_delete_story=[True])
        nav.dispatch(NavigateToEpicDetail(epic_id=2))
        nav.dispatch(NavigateToStoryDetail(story_id=5, epic_id=2))

        with pytest.raises(StoryNotFoundError):
            nav.dispatch(DeleteStory(story_id=5, epic_id=2))

        assert nav.page_count == 3
        assert 5 in db.read().stories

    def test_delete_epic_pops_to_home(self, db: TrackerDatabase) -> None:
        nav = _nav(db, confirm_delete_epic=[True])
        nav.dispatch(NavigateToEpicDetail(epic_id=2))

        nav.dispatch(DeleteEpic(epic_id=2))

        state = db.read()
        assert 2 not in state.epics
        assert 3 not in state.stories
        assert 4 not in state.stories
        assert nav.current_page == HomePage()

    def test_delete_epic_declined(self, db: TrackerDatabase) -> None:
        prompts = ScriptedPrompts(confirm_delete_epic=[False])
        nav = Navigator(db, prompts)
        nav.dispatch(NavigateToEpicDetail(epic_id=2))
        nav.dispatch(DeleteEpic(epic_id=2))
        assert 2 in db.read().epics
        assert nav.page_count == 2
        assert prompts.asked == ["confirm_delete_epic"]
