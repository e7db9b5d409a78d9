"""
选课记录数据访问层
"""

from typing import Any, Dict, List, Optional, Set
from datetime import datetime

from coursehub.core.exceptions import ConflictError, NotFoundError
from coursehub.models.enrollment import (
    Enrollment,
    EnrollmentCreate,
    EnrollmentStatus,
    EnrollmentUpdate
)
from coursehub.repositories.base import BaseRepository


class EnrollmentRepository(BaseRepository[Enrollment]):
    """选课记录数据访问层"""

    model = Enrollment
    create_model = EnrollmentCreate
    update_model = EnrollmentUpdate
    collection_name = "enrollments"
    entity_label = "选课记录"

    def find(self, user_id: int, course_id: int) -> Optional[Enrollment]:
        """按(用户, 课程)组合键查找选课记录"""
        return self.find_one(
            lambda enrollment: enrollment.user_id == user_id and enrollment.course_id == course_id
        )

    def list_by_user(self, user_id: int) -> List[Enrollment]:
        """获取用户的全部选课记录"""
        return self.filter(lambda enrollment: enrollment.user_id == user_id)

    def list_by_course(self, course_id: int) -> List[Enrollment]:
        """获取课程的全部选课记录"""
        return self.filter(lambda enrollment: enrollment.course_id == course_id)

    def update_progress(
        self,
        enrollment_id: int,
        progress: int,
        completed_lessons: Set[int],
        status: Optional[EnrollmentStatus] = None,
        completed_at: Optional[datetime] = None
    ) -> Enrollment:
        """写入进度相关字段"""
        update_data: Dict[str, Any] = {
            "progress": progress,
            "completed_lessons": set(completed_lessons)
        }
        if status is not None:
            update_data["status"] = status
        if completed_at is not None:
            update_data["completed_at"] = completed_at

        return self.update(enrollment_id, update_data)

    def _before_create(self, fields: Dict[str, Any]) -> None:
        user_id, course_id = fields["user_id"], fields["course_id"]

        if self.find(user_id, course_id) is not None:
            raise ConflictError(f"用户已选过该课程: user_id={user_id}, course_id={course_id}")
        if course_id not in self.store.courses:
            raise NotFoundError(f"课程不存在: {course_id}")
        if user_id not in self.store.users:
            raise NotFoundError(f"用户不存在: {user_id}")
