from pydantic import BaseModel, ConfigDict, Field


class CommentInput(BaseModel):
    """
    Pydantic model for creating or editing a comment.

    The content must be between 20 and 300 characters long.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "content": "A comment that is long enough to be accepted."
            }
        }
    )

    content: str = Field(..., min_length=20, max_length=300, description="The content of the comment.")
