from datetime import datetime
from typing import Callable, Dict, Iterable, Optional
import logging

from sqlalchemy import and_, case, func, null, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from app.core.exceptions import ConflictError, NotFoundError
from app.db.base import utcnow
from app.db.models import LikeStatus, User
from app.schemas.reaction import ReactionSummary, RecentLike
from app.services.reactions.kinds import ReactionKind

logger = logging.getLogger(__name__)

RECENT_LIKES_LIMIT = 3


class ReactionStore:
    """
    Durable reaction rows of one kind (post or comment).

    At most one row exists per (user, target); a "None" status is the
    absence of a row.
    """

    def __init__(self, db: Session, kind: ReactionKind, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.kind = kind
        self.clock = clock

    def _pair_filter(self, actor_id: str, target_id: str):
        model = self.kind.reaction_model
        return and_(model.user_id == actor_id, self.kind.target_key == target_id)

    def find_one(self, actor_id: str, target_id: str):
        return self.db.query(self.kind.reaction_model).filter(
            self._pair_filter(actor_id, target_id)
        ).first()

    def create(self, actor_id: str, target_id: str, status: LikeStatus):
        """Insert a reaction row.

        Raises:
            ValueError: status is LikeStatus.NONE, which is never stored
            ConflictError: the user already has a reaction on this target
            NotFoundError: the target or user row does not exist
        """
        if status == LikeStatus.NONE:
            raise ValueError("LikeStatus.NONE is represented by the absence of a row")

        reaction = self.kind.reaction_model(
            user_id=actor_id,
            status=status,
            added_at=self.clock(),
            **{self.kind.target_column: target_id},
        )
        try:
            self.db.add(reaction)
            self.db.commit()
            self.db.refresh(reaction)
        except IntegrityError as e:
            self.db.rollback()
            if self.find_one(actor_id, target_id) is not None:
                logger.warning(f"Duplicate {self.kind.name} reaction by user {actor_id} on {target_id}")
                raise ConflictError(
                    f"User {actor_id} already reacted to {self.kind.name} {target_id}"
                ) from e
            logger.warning(f"Reaction references a missing {self.kind.name} {target_id} or user {actor_id}")
            raise NotFoundError(f"{self.kind.name.capitalize()} {target_id} not found") from e

        logger.info(f"Created {status.value} on {self.kind.name} {target_id} by user {actor_id}")
        return reaction

    def update_status(self, actor_id: str, target_id: str, new_status: LikeStatus):
        """Set a new status and refresh added_at; returns None when there is no row."""
        if new_status == LikeStatus.NONE:
            raise ValueError("LikeStatus.NONE is represented by the absence of a row")

        reaction = self.find_one(actor_id, target_id)
        if reaction is None:
            return None

        try:
            reaction.status = new_status
            reaction.added_at = self.clock()
            self.db.commit()
            self.db.refresh(reaction)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating {self.kind.name} reaction {reaction.id}: {str(e)}")
            raise

        logger.info(f"Changed reaction on {self.kind.name} {target_id} by user {actor_id} to {new_status.value}")
        return reaction

    def delete(self, actor_id: str, target_id: str) -> bool:
        try:
            deleted = self.db.query(self.kind.reaction_model).filter(
                self._pair_filter(actor_id, target_id)
            ).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting {self.kind.name} reaction on {target_id}: {str(e)}")
            raise

        if deleted:
            logger.info(f"Removed reaction on {self.kind.name} {target_id} by user {actor_id}")
        return deleted > 0

    def batch_summarize(
        self,
        target_ids: Iterable[str],
        viewer_id: Optional[str] = None
    ) -> Dict[str, ReactionSummary]:
        """
        Build reaction summaries for many targets with a single SELECT.

        The statement is driven by the target table, so every listed target
        that exists and is not soft-deleted gets a row (zero counts when it has
        no reactions) and everything else is left out of the result. For post
        reactions, each target row is repeated once per recent like (at most
        RECENT_LIKES_LIMIT), ranked by added_at desc then user id.

        Args:
            target_ids: Post or comment ids, depending on the store kind
            viewer_id: User whose own status is reported; None for anonymous reads

        Returns:
            Mapping of target id to ReactionSummary
        """
        ids = list(target_ids)
        kind = self.kind
        reaction = kind.reaction_model
        target = kind.target_model

        counts = (
            select(
                kind.target_key.label("target_id"),
                func.count(case((reaction.status == LikeStatus.LIKE, 1))).label("like_count"),
                func.count(case((reaction.status == LikeStatus.DISLIKE, 1))).label("dislike_count"),
            )
            .where(kind.target_key.in_(ids))
            .group_by(kind.target_key)
            .subquery("counts")
        )

        stmt = (
            select(
                target.id.label("target_id"),
                func.coalesce(counts.c.like_count, 0).label("like_count"),
                func.coalesce(counts.c.dislike_count, 0).label("dislike_count"),
            )
            .select_from(target)
            .outerjoin(counts, counts.c.target_id == target.id)
            .where(target.id.in_(ids), target.deleted_at.is_(None))
        )

        if viewer_id is not None:
            mine = aliased(reaction, name="mine")
            stmt = stmt.add_columns(mine.status.label("viewer_status")).outerjoin(
                mine,
                and_(getattr(mine, kind.target_column) == target.id, mine.user_id == viewer_id),
            )
        else:
            stmt = stmt.add_columns(null().label("viewer_status"))

        if kind.tracks_recent_likes:
            rank = func.row_number().over(
                partition_by=kind.target_key,
                order_by=(reaction.added_at.desc(), reaction.user_id.asc()),
            )
            recent = (
                select(
                    kind.target_key.label("target_id"),
                    reaction.user_id.label("actor_id"),
                    User.login.label("actor_login"),
                    reaction.added_at.label("reacted_at"),
                    rank.label("rank"),
                )
                .select_from(reaction)
                .join(User, User.id == reaction.user_id)
                .where(kind.target_key.in_(ids), reaction.status == LikeStatus.LIKE)
                .subquery("recent")
            )
            stmt = (
                stmt.add_columns(recent.c.actor_id, recent.c.actor_login, recent.c.reacted_at)
                .outerjoin(
                    recent,
                    and_(recent.c.target_id == target.id, recent.c.rank <= RECENT_LIKES_LIMIT),
                )
                .order_by(target.id, recent.c.rank)
            )

        summaries: Dict[str, ReactionSummary] = {}
        for row in self.db.execute(stmt):
            summary = summaries.get(row.target_id)
            if summary is None:
                summary = ReactionSummary(
                    like_count=row.like_count,
                    dislike_count=row.dislike_count,
                    viewer_status=row.viewer_status or LikeStatus.NONE,
                )
                summaries[row.target_id] = summary
            if kind.tracks_recent_likes and row.actor_id is not None:
                summary.recent_likes.append(
                    RecentLike(
                        actor_id=row.actor_id,
                        actor_display_name=row.actor_login,
                        reacted_at=row.reacted_at,
                    )
                )

        logger.debug(f"Summarized reactions for {len(summaries)}/{len(ids)} {kind.name} targets")
        return summaries
