"""
课程评价数据模型
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from coursehub.models.user import User


class Review(BaseModel):
    """课程评价模型 - 创建后不可修改"""

    id: int = Field(..., ge=1, description="评价ID")
    user_id: int = Field(..., ge=1, description="评价用户ID")
    course_id: int = Field(..., ge=1, description="课程ID")
    rating: int = Field(..., ge=1, le=5, description="评分 1-5")
    comment: Optional[str] = Field(None, max_length=5000, description="评价内容")
    created_at: datetime = Field(default_factory=datetime.now)


class ReviewCreate(BaseModel):
    """创建评价数据模型"""

    user_id: int = Field(..., ge=1)
    course_id: int = Field(..., ge=1)
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = Field(None, max_length=5000)


class ReviewWithUser(Review):
    """评价与评价用户的联表结果"""

    user: User

    @classmethod
    def from_review(cls, review: Review, user: User) -> "ReviewWithUser":
        """从Review模型创建联表对象"""
        return cls(
            id=review.id,
            user_id=review.user_id,
            course_id=review.course_id,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
            user=user
        )
