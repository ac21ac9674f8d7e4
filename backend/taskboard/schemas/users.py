from typing import List

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = 0
    name: str
    email: str
    role: str


class UserCreate(BaseModel):
    model_config = ConfigDict(strict=True)

    # presence is checked in the router
    name: str = ""
    email: str = ""
    role: str = ""


class UsersResponse(BaseModel):
    users: List[User]
    count: int
