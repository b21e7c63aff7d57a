import enum
import logging

from app.db.models import LikeStatus
from app.services.reactions.store import ReactionStore

logger = logging.getLogger(__name__)


class ReactionChange(str, enum.Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    UNCHANGED = "unchanged"


class ReactionCommandProcessor:
    """Turns a user's desired like status into the smallest store mutation."""

    def __init__(self, store: ReactionStore):
        self.store = store

    def apply(self, actor_id: str, target_id: str, desired: LikeStatus) -> ReactionChange:
        """
        Apply a like status submitted by actor_id for target_id.

        None removes the row, a new status inserts one, a different status
        updates it in place and refreshes its timestamp. Re-submitting the
        current status changes nothing.

        Raises:
            ConflictError: a concurrent request created the row first
        """
        if desired == LikeStatus.NONE:
            removed = self.store.delete(actor_id, target_id)
            return ReactionChange.DELETED if removed else ReactionChange.UNCHANGED

        existing = self.store.find_one(actor_id, target_id)
        if existing is None:
            self.store.create(actor_id, target_id, desired)
            return ReactionChange.CREATED

        if existing.status == desired:
            logger.debug(f"Reaction on {self.store.kind.name} {target_id} by {actor_id} already {desired.value}")
            return ReactionChange.UNCHANGED

        if self.store.update_status(actor_id, target_id, desired) is None:
            logger.warning(f"Reaction on {self.store.kind.name} {target_id} by {actor_id} vanished before update")
            self.store.create(actor_id, target_id, desired)
            return ReactionChange.CREATED
        return ReactionChange.UPDATED
