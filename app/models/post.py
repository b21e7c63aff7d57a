from typing import Annotated
from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel


class PostForBlogInput(BaseModel):
    """Fields of a post created or updated under /sa/blogs/{blogId}/posts."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=30)]
    short_description: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
    content: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=1000)]
