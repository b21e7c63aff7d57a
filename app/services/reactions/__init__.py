from .kinds import ReactionKind, POST_REACTIONS, COMMENT_REACTIONS
from .store import ReactionStore, RECENT_LIKES_LIMIT
from .aggregator import ReactionAggregator
from .processor import ReactionChange, ReactionCommandProcessor
from .service import ReactionService

__all__ = [
    "ReactionKind",
    "POST_REACTIONS",
    "COMMENT_REACTIONS",
    "ReactionStore",
    "RECENT_LIKES_LIMIT",
    "ReactionAggregator",
    "ReactionChange",
    "ReactionCommandProcessor",
    "ReactionService",
]
