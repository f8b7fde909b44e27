from typing import Literal
from pydantic import BaseModel, EmailStr, Field

UserType = Literal["Docente", "Discente"]

class RegisterReq(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    surname: str = Field(min_length=1, max_length=120)
    email: EmailStr
    type: UserType
    password: str = Field(min_length=6)

class SessionReq(BaseModel):
    email: EmailStr
    password: str

class UpdateProfileReq(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    surname: str = Field(min_length=1, max_length=120)
    email: EmailStr
    type: UserType
    old_password: str | None = None
    password: str | None = Field(default=None, min_length=6)

class UserResp(BaseModel):
    id: str
    name: str
    surname: str
    email: EmailStr
    type: str
    class Config: from_attributes = True

class SessionResp(BaseModel):
    user: UserResp
    access_token: str
    token_type: str = "bearer"
