"""
用户相关数据模型
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, validator
from enum import Enum


class UserRole(str, Enum):
    """用户角色枚举"""
    STUDENT = "student"
    INSTRUCTOR = "instructor"
    ADMIN = "admin"


class User(BaseModel):
    """用户基础模型"""

    id: int = Field(..., ge=1, description="用户唯一标识")
    username: str = Field(..., min_length=1, max_length=100, description="用户名")
    # 凭证由认证层提供，任何序列化输出都不包含该字段
    password: str = Field(..., min_length=1, exclude=True, repr=False, description="登录凭证")
    email: Optional[str] = Field(None, max_length=254, description="邮箱")
    first_name: Optional[str] = Field(None, max_length=100, description="名")
    last_name: Optional[str] = Field(None, max_length=100, description="姓")
    avatar: Optional[str] = Field(None, description="头像地址")
    bio: Optional[str] = Field(None, max_length=2000, description="个人简介")
    role: UserRole = Field(default=UserRole.STUDENT, description="用户角色")
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def full_name(self) -> str:
        """完整姓名，缺失时回退为用户名"""
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) if parts else self.username


class UserCreate(BaseModel):
    """创建用户数据模型"""

    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
    email: Optional[str] = Field(None, max_length=254)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    avatar: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=2000)
    role: UserRole = Field(default=UserRole.STUDENT)

    @validator('username')
    def normalize_username(cls, v):
        """用户名去除首尾空白"""
        v = v.strip()
        if not v:
            raise ValueError('用户名不能为空')
        return v

    @validator('email')
    def normalize_email(cls, v):
        """邮箱统一小写，空字符串视为未填写"""
        if v is None:
            return None
        v = v.strip().lower()
        if not v:
            return None
        if '@' not in v:
            raise ValueError('邮箱格式不正确')
        return v


class UserUpdate(BaseModel):
    """更新用户资料数据模型"""

    username: Optional[str] = Field(None, min_length=1, max_length=100)
    password: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, max_length=254)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    avatar: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=2000)
    role: Optional[UserRole] = None

    @validator('email')
    def normalize_email(cls, v):
        if v is None:
            return None
        v = v.strip().lower()
        if '@' not in v:
            raise ValueError('邮箱格式不正确')
        return v
