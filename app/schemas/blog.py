from app.schemas.common import CamelModel, UtcDatetime


class BlogView(CamelModel):
    id: str
    name: str
    description: str
    website_url: str
    created_at: UtcDatetime
    is_membership: bool
