import pytest
from unittest.mock import MagicMock

from app.core.exceptions import ConflictError
from app.db.models import LikeStatus
from app.services.reactions import (
    COMMENT_REACTIONS,
    ReactionChange,
    ReactionCommandProcessor,
    ReactionService,
)


@pytest.fixture
def store():
    store = MagicMock()
    store.kind = COMMENT_REACTIONS
    return store


def existing(status):
    reaction = MagicMock()
    reaction.status = status
    return reaction


class TestReactionCommandProcessor:
    def test_none_deletes_the_row(self, store):
        store.delete.return_value = True

        change = ReactionCommandProcessor(store).apply("user-1", "target-1", LikeStatus.NONE)

        assert change == ReactionChange.DELETED
        store.delete.assert_called_once_with("user-1", "target-1")
        store.find_one.assert_not_called()

    def test_none_without_row_is_a_no_op(self, store):
        store.delete.return_value = False

        change = ReactionCommandProcessor(store).apply("user-1", "target-1", LikeStatus.NONE)

        assert change == ReactionChange.UNCHANGED

    def test_first_reaction_creates_a_row(self, store):
        store.find_one.return_value = None

        change = ReactionCommandProcessor(store).apply("user-1", "target-1", LikeStatus.LIKE)

        assert change == ReactionChange.CREATED
        store.create.assert_called_once_with("user-1", "target-1", LikeStatus.LIKE)
        store.update_status.assert_not_called()

    def test_same_status_changes_nothing(self, store):
        store.find_one.return_value = existing(LikeStatus.DISLIKE)

        change = ReactionCommandProcessor(store).apply("user-1", "target-1", LikeStatus.DISLIKE)

        assert change == ReactionChange.UNCHANGED
        store.create.assert_not_called()
        store.update_status.assert_not_called()
        store.delete.assert_not_called()

    def test_different_status_updates_in_place(self, store):
        store.find_one.return_value = existing(LikeStatus.LIKE)

        change = ReactionCommandProcessor(store).apply("user-1", "target-1", LikeStatus.DISLIKE)

        assert change == ReactionChange.UPDATED
        store.update_status.assert_called_once_with("user-1", "target-1", LikeStatus.DISLIKE)
        store.create.assert_not_called()

    def test_row_vanishing_before_update_is_recreated(self, store, caplog):
        store.find_one.return_value = existing(LikeStatus.LIKE)
        store.update_status.return_value = None

        with caplog.at_level("WARNING"):
            change = ReactionCommandProcessor(store).apply("user-1", "target-1", LikeStatus.DISLIKE)

        assert change == ReactionChange.CREATED
        store.create.assert_called_once_with("user-1", "target-1", LikeStatus.DISLIKE)
        assert "vanished before update" in caplog.text

    def test_create_conflict_propagates(self, store):
        store.find_one.return_value = None
        store.create.side_effect = ConflictError("duplicate")

        with pytest.raises(ConflictError):
            ReactionCommandProcessor(store).apply("user-1", "target-1", LikeStatus.LIKE)


class TestReactionServiceConflicts:
    @pytest.fixture
    def service(self, store):
        service = ReactionService(MagicMock(), COMMENT_REACTIONS)
        service.store = store
        service.processor = MagicMock()
        service.processor.apply.side_effect = ConflictError("duplicate")
        return service

    def test_lost_race_with_same_status_is_success(self, service, store):
        store.find_one.return_value = existing(LikeStatus.LIKE)

        change = service.set_status("user-1", "target-1", LikeStatus.LIKE)

        assert change == ReactionChange.UNCHANGED
        store.update_status.assert_not_called()

    def test_lost_race_with_other_status_is_confirmed(self, service, store):
        store.find_one.return_value = existing(LikeStatus.DISLIKE)

        change = service.set_status("user-1", "target-1", LikeStatus.LIKE)

        assert change == ReactionChange.UPDATED
        store.update_status.assert_called_once_with("user-1", "target-1", LikeStatus.LIKE)

    def test_conflict_without_row_is_raised(self, service, store):
        store.find_one.return_value = None

        with pytest.raises(ConflictError):
            service.set_status("user-1", "target-1", LikeStatus.LIKE)
