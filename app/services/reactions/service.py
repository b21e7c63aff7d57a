from datetime import datetime
from typing import Callable
import logging

from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError
from app.db.base import utcnow
from app.db.models import LikeStatus
from app.services.reactions.aggregator import ReactionAggregator
from app.services.reactions.kinds import ReactionKind
from app.services.reactions.processor import ReactionChange, ReactionCommandProcessor
from app.services.reactions.store import ReactionStore

logger = logging.getLogger(__name__)


class ReactionService:
    """Wires store, aggregator and processor for one reaction kind."""

    def __init__(self, db: Session, kind: ReactionKind, clock: Callable[[], datetime] = utcnow):
        self.store = ReactionStore(db, kind, clock)
        self.aggregator = ReactionAggregator(self.store)
        self.processor = ReactionCommandProcessor(self.store)

    def set_status(self, actor_id: str, target_id: str, desired: LikeStatus) -> ReactionChange:
        """Apply a like status; losing a create race to the same user counts as success."""
        try:
            return self.processor.apply(actor_id, target_id, desired)
        except ConflictError:
            existing = self.store.find_one(actor_id, target_id)
            if existing is None:
                raise
            logger.info(
                f"Concurrent {self.store.kind.name} reaction by {actor_id} on {target_id}; "
                f"confirming {desired.value}"
            )
            if existing.status != desired:
                self.store.update_status(actor_id, target_id, desired)
                return ReactionChange.UPDATED
            return ReactionChange.UNCHANGED
