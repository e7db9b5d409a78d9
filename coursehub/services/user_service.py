"""
用户业务服务层
"""

import logging
from typing import Any, Dict, Optional, Union

from coursehub.core.exceptions import BusinessException
from coursehub.core.store import MemoryStore
from coursehub.models.user import User, UserCreate, UserUpdate
from coursehub.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """用户业务服务"""

    def __init__(self, store: MemoryStore):
        self.store = store
        self.user_repo = UserRepository(store)

    async def register_user(self, user_data: Union[UserCreate, Dict[str, Any]]) -> User:
        """注册用户，用户名与邮箱唯一"""
        try:
            user = self.user_repo.create(user_data)
        except BusinessException as e:
            logger.warning(f"注册用户失败: {e}")
            raise

        logger.info(f"用户注册成功: user_id={user.id}, username={user.username}")
        return user

    async def get_user(self, user_id: int) -> Optional[User]:
        return self.user_repo.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return self.user_repo.get_by_username(username)

    async def update_profile(self, user_id: int, update_data: Union[UserUpdate, Dict[str, Any]]) -> User:
        """更新用户资料"""
        try:
            return self.user_repo.update(user_id, update_data)
        except BusinessException as e:
            logger.warning(f"更新用户资料失败 user_id={user_id}: {e}")
            raise
