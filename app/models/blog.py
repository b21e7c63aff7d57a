from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel


BlogName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=15)]
WebsiteUrl = Annotated[
    str,
    StringConstraints(
        max_length=100,
        pattern=r"^https://([a-zA-Z0-9_-]+\.)+[a-zA-Z0-9_-]+(/[a-zA-Z0-9_-]+)*/?$",
    ),
]


class BlogInput(BaseModel):
    """
    Pydantic model for creating or updating a blog.

    websiteUrl must be an https URL of at most 100 characters.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Tech notes",
                "description": "Short posts about backend engineering",
                "websiteUrl": "https://tech-notes.example.com"
            }
        }
    )

    name: BlogName
    description: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]
    website_url: WebsiteUrl = Field(..., description="https URL of the blog's site")
