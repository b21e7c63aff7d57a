from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import CamelModel, UtcDatetime


class UserView(CamelModel):
    id: str
    login: str
    email: str
    created_at: UtcDatetime


class MeView(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId")
    login: str
    email: str
