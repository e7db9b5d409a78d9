"""
课程评价数据访问层
"""

from typing import Any, Dict, List, Optional

from coursehub.core.exceptions import ConflictError, ForbiddenError
from coursehub.models.review import Review, ReviewCreate
from coursehub.repositories.base import BaseRepository


class ReviewRepository(BaseRepository[Review]):
    """课程评价数据访问层 - 评价创建后不可修改"""

    model = Review
    create_model = ReviewCreate
    collection_name = "reviews"
    entity_label = "评价"

    def find(self, user_id: int, course_id: int) -> Optional[Review]:
        """按(用户, 课程)组合键查找评价"""
        return self.find_one(
            lambda review: review.user_id == user_id and review.course_id == course_id
        )

    def list_by_course(self, course_id: int) -> List[Review]:
        """获取课程的全部评价"""
        return self.filter(lambda review: review.course_id == course_id)

    def update(self, entity_id: int, data) -> Review:
        raise ForbiddenError("评价创建后不可修改")

    def _before_create(self, fields: Dict[str, Any]) -> None:
        user_id, course_id = fields["user_id"], fields["course_id"]
        if self.find(user_id, course_id) is not None:
            raise ConflictError(f"用户已评价过该课程: user_id={user_id}, course_id={course_id}")
