"""
用户数据访问层
"""

from typing import Any, Dict, List, Optional

from coursehub.models.user import User, UserCreate, UserUpdate
from coursehub.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """用户数据访问层"""

    model = User
    create_model = UserCreate
    update_model = UserUpdate
    collection_name = "users"
    entity_label = "用户"

    def get_by_username(self, username: str) -> Optional[User]:
        """根据用户名获取用户"""
        return self.find_one(lambda user: user.username == username)

    def get_by_email(self, email: str) -> Optional[User]:
        """根据邮箱获取用户"""
        email = email.strip().lower()
        return self.find_one(lambda user: user.email == email)

    def get_many(self, user_ids: List[int]) -> Dict[int, User]:
        """批量获取用户，缺失的ID不出现在结果中"""
        users = {}
        for user_id in user_ids:
            user = self.get(user_id)
            if user:
                users[user_id] = user
        return users

    def _before_create(self, fields: Dict[str, Any]) -> None:
        self._ensure_unique("username", fields["username"], label="用户名")
        self._ensure_unique("email", fields.get("email"), label="邮箱")

    def _before_update(self, current: User, changes: Dict[str, Any]) -> None:
        if "username" in changes:
            self._ensure_unique("username", changes["username"], exclude_id=current.id, label="用户名")
        if "email" in changes:
            self._ensure_unique("email", changes["email"], exclude_id=current.id, label="邮箱")
