import enum

class LikeStatus(str, enum.Enum):
    NONE = "None"
    LIKE = "Like"
    DISLIKE = "Dislike"
