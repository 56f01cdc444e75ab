from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from fleet.core.security import get_password_hash, verify_password
from fleet.repositories.base import BaseRepository
from fleet.schemas.user import StoredUser, User, UserCreate, UserUpdate


class UserRepository(BaseRepository[User]):
    """Users. Returned records never carry the password hash."""

    table = "users"
    entity_type = "user"
    record_type = User
    create_type = UserCreate
    update_type = UserUpdate

    def _new_item(self, data: BaseModel) -> Dict[str, Any]:
        item = super()._new_item(data)
        item["hashedPassword"] = get_password_hash(item.pop("password"))
        return item

    def _stored(self, **filters) -> List[StoredUser]:
        return [StoredUser.model_validate(item) for item in self.gateway.scan(self.table, filters=filters)]

    def get_by_username(self, username: str) -> Optional[User]:
        matches = self._scan(username=username)
        return matches[0] if matches else None

    def get_by_email(self, email: str) -> Optional[User]:
        matches = self._scan(email=email)
        return matches[0] if matches else None

    def authenticate(self, username: str, password: str) -> Optional[User]:
        for user in self._stored(username=username):
            if verify_password(password, user.hashed_password):
                return user.public()
        return None
