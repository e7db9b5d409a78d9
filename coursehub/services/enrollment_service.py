"""
选课生命周期服务
处理选课、课时完成与进度更新，状态只允许 active -> completed
"""

import logging
from typing import List, Optional

from coursehub.core.exceptions import (
    BusinessException,
    ForbiddenError,
    InconsistentStateError,
    InvalidInputError,
    NotFoundError,
    require_user_id
)
from coursehub.core.store import MemoryStore
from coursehub.models.enrollment import Enrollment, EnrollmentWithCourse
from coursehub.repositories.course_repository import CourseRepository
from coursehub.repositories.enrollment_repository import EnrollmentRepository
from coursehub.repositories.lesson_repository import LessonRepository
from coursehub.services.aggregation_service import AggregationService

logger = logging.getLogger(__name__)


class EnrollmentService:
    """选课业务服务"""

    def __init__(self, store: MemoryStore, aggregation: Optional[AggregationService] = None):
        self.store = store
        self.enrollment_repo = EnrollmentRepository(store)
        self.course_repo = CourseRepository(store)
        self.lesson_repo = LessonRepository(store)
        self.aggregation = aggregation or AggregationService(store)

    async def enroll(self, user_id: Optional[int], course_id: int) -> Enrollment:
        """选课，同一用户对同一课程只能选一次"""
        user_id = require_user_id(user_id)

        try:
            enrollment = self.enrollment_repo.create({"user_id": user_id, "course_id": course_id})
        except BusinessException as e:
            logger.warning(f"选课失败 user_id={user_id}, course_id={course_id}: {e}")
            raise

        logger.info(f"选课成功: enrollment_id={enrollment.id}, user_id={user_id}, course_id={course_id}")
        return enrollment

    async def find_enrollment(self, user_id: int, course_id: int) -> Optional[Enrollment]:
        """按(用户, 课程)查找选课记录"""
        return self.enrollment_repo.find(user_id, course_id)

    async def get_enrollment(self, enrollment_id: int) -> Optional[Enrollment]:
        """获取选课记录"""
        return self.enrollment_repo.get(enrollment_id)

    async def list_user_enrollments(self, user_id: int) -> List[EnrollmentWithCourse]:
        """获取用户的选课记录及对应课程"""
        results = []
        for enrollment in self.enrollment_repo.list_by_user(user_id):
            course = self.course_repo.get(enrollment.course_id)
            if course is None:
                logger.error(f"选课记录引用的课程缺失: enrollment_id={enrollment.id}, course_id={enrollment.course_id}")
                raise InconsistentStateError(f"选课记录引用的课程不存在: {enrollment.course_id}")
            results.append(EnrollmentWithCourse.from_enrollment(enrollment, course))
        return results

    async def complete_lesson(
        self,
        user_id: Optional[int],
        enrollment_id: int,
        course_id: int,
        lesson_id: int
    ) -> Enrollment:
        """标记课时完成并重算进度"""
        user_id = require_user_id(user_id)

        try:
            with self.store.lock:
                enrollment = self.enrollment_repo.find(user_id, course_id)
                if enrollment is None or enrollment.id != enrollment_id:
                    raise ForbiddenError(f"无权更新该选课记录: {enrollment_id}")

                self._ensure_course_lesson(course_id, lesson_id)
                return self.aggregation.recompute_enrollment_progress(enrollment_id, lesson_id)
        except BusinessException as e:
            logger.warning(f"课时完成失败 enrollment_id={enrollment_id}, lesson_id={lesson_id}: {e}")
            raise

    async def set_progress(
        self,
        user_id: Optional[int],
        enrollment_id: int,
        progress: int,
        lesson_id: Optional[int] = None
    ) -> Enrollment:
        """通用进度更新入口

        已完成课时集合是进度的唯一来源：传入lesson_id时记录该课时并按集合重算；
        progress为100时执行显式完成；其他与派生值不一致的进度值只记录日志，不会写入。
        """
        user_id = require_user_id(user_id)
        if isinstance(progress, bool) or not isinstance(progress, int) or not 0 <= progress <= 100:
            raise InvalidInputError(f"进度必须是0-100之间的整数: {progress}")

        with self.store.lock:
            enrollment = self.enrollment_repo.get_or_raise(enrollment_id)
            if enrollment.user_id != user_id:
                raise ForbiddenError(f"无权更新该选课记录: {enrollment_id}")

            if lesson_id is not None:
                self._ensure_course_lesson(enrollment.course_id, lesson_id)
                enrollment = self.aggregation.recompute_enrollment_progress(enrollment_id, lesson_id)

            if progress == 100:
                enrollment = self.aggregation.complete_enrollment(enrollment_id)
            elif progress != enrollment.progress:
                logger.warning(
                    f"忽略与已完成课时不一致的进度值: enrollment_id={enrollment_id}, "
                    f"requested={progress}, derived={enrollment.progress}"
                )

        return enrollment

    def _ensure_course_lesson(self, course_id: int, lesson_id: int) -> None:
        if not self.course_repo.exists(course_id):
            raise NotFoundError(f"课程不存在: {course_id}")

        lessons = self.lesson_repo.list_by_course(course_id)
        if not lessons:
            raise NotFoundError(f"课程没有课时: {course_id}")
        if lesson_id not in {lesson.id for lesson in lessons}:
            raise NotFoundError(f"课时不属于该课程: lesson_id={lesson_id}, course_id={course_id}")
