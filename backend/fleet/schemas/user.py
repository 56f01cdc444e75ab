from pydantic import Field
from typing import Literal, Optional

from fleet.schemas.base import Document, Patch

Role = Literal["admin", "manager", "viewer"]


class UserCreate(Document):
    username: str = Field(min_length=1)
    password: str = Field(min_length=8)
    email: Optional[str] = None
    role: Role = "viewer"


class UserUpdate(Patch):
    not_null = ("role",)

    email: Optional[str] = None
    role: Optional[Role] = None


class User(Document):
    id: str
    username: str
    email: Optional[str] = None
    role: Role = "viewer"
    created_at: str
    updated_at: str


class StoredUser(User):
    hashed_password: str

    def public(self) -> User:
        return User(**self.model_dump(exclude={"hashed_password"}))
