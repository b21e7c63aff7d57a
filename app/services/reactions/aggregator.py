from typing import Dict, Iterable, Mapping, Optional
import logging

from app.core.exceptions import NotFoundError, ReadModelIntegrityError
from app.schemas.reaction import ReactionSummary
from app.services.reactions.store import ReactionStore

logger = logging.getLogger(__name__)


class ReactionAggregator:
    """Batched reaction read-models for posts or comments.

    Every read goes through summarize_many so single and page reads share
    one query path.
    """

    def __init__(self, store: ReactionStore):
        self.store = store

    def summarize_many(
        self,
        target_ids: Iterable[str],
        viewer_id: Optional[str] = None
    ) -> Dict[str, ReactionSummary]:
        ids = set(target_ids)
        if not ids:
            return {}
        return self.store.batch_summarize(ids, viewer_id)

    def summarize_one(self, target_id: str, viewer_id: Optional[str] = None) -> ReactionSummary:
        summary = self.summarize_many({target_id}, viewer_id).get(target_id)
        if summary is None:
            logger.warning(f"No reaction summary for {self.store.kind.name} {target_id}")
            raise NotFoundError(f"{self.store.kind.name.capitalize()} {target_id} not found")
        return summary

    def summary_for(self, summaries: Mapping[str, ReactionSummary], target_id: str) -> ReactionSummary:
        """Pick the summary of a target the caller has already loaded.

        Raises:
            ReadModelIntegrityError: the target is missing from the batch
        """
        summary = summaries.get(target_id)
        if summary is None:
            logger.error(f"Reaction summary missing for loaded {self.store.kind.name} {target_id}")
            raise ReadModelIntegrityError(
                f"Reaction summary missing for {self.store.kind.name} {target_id}"
            )
        return summary
