from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    login_or_email: str = Field(..., alias="loginOrEmail", min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken")


class UserCreate(BaseModel):
    login: str = Field(..., min_length=3, max_length=10, pattern=r"^[a-zA-Z0-9_-]*$")
    password: str = Field(..., min_length=6, max_length=20)
    email: EmailStr
