"""
派生字段聚合服务
负责课程评分/评价数、选课进度的全量重算。纯内存计算，方法为同步调用，
由评价与选课服务在同一锁区间内直接调用
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from datetime import datetime
from typing import Optional, Set

from coursehub.core.exceptions import NotFoundError
from coursehub.core.store import MemoryStore
from coursehub.models.course import Course
from coursehub.models.enrollment import Enrollment, EnrollmentStatus
from coursehub.repositories.course_repository import CourseRepository
from coursehub.repositories.enrollment_repository import EnrollmentRepository
from coursehub.repositories.lesson_repository import LessonRepository
from coursehub.repositories.review_repository import ReviewRepository

logger = logging.getLogger(__name__)


def calculate_progress(completed_count: int, total_lessons: int) -> int:
    """进度百分比 = round(100 * 已完成数 / 总课时数)，四舍五入并截断到[0, 100]"""
    if total_lessons <= 0:
        return 0
    ratio = Decimal(100 * completed_count) / Decimal(total_lessons)
    progress = int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return max(0, min(100, progress))


class AggregationService:
    """派生字段聚合服务"""

    def __init__(self, store: MemoryStore):
        self.store = store
        self.course_repo = CourseRepository(store)
        self.lesson_repo = LessonRepository(store)
        self.enrollment_repo = EnrollmentRepository(store)
        self.review_repo = ReviewRepository(store)

    def recompute_course_rating(self, course_id: int) -> Course:
        """根据课程全部评价重算平均评分与评价数量"""
        with self.store.lock:
            self.course_repo.get_or_raise(course_id)
            reviews = self.review_repo.list_by_course(course_id)

            if not reviews:
                rating, review_count = 0.0, 0
            else:
                review_count = len(reviews)
                # 存储未取整的平均值，展示格式由上层决定
                rating = sum(review.rating for review in reviews) / review_count

            course = self.course_repo.update_course_stats(
                course_id=course_id,
                new_rating=rating,
                new_review_count=review_count
            )

        logger.info(f"课程评分重算完成: course_id={course_id}, rating={rating}, review_count={review_count}")
        return course

    def recompute_enrollment_progress(self, enrollment_id: int, completed_lesson_id: int) -> Enrollment:
        """记录完成的课时并根据已完成课时集合重算进度"""
        with self.store.lock:
            enrollment = self.enrollment_repo.get_or_raise(enrollment_id)
            total_lessons = self.lesson_repo.count_by_course(enrollment.course_id)
            if total_lessons == 0:
                raise NotFoundError(f"课程没有课时，无法计算进度: course_id={enrollment.course_id}")

            completed = set(enrollment.completed_lessons)
            completed.add(completed_lesson_id)
            progress = calculate_progress(len(completed), total_lessons)

            updated = self._write_progress(enrollment, completed, progress)

        logger.info(
            f"选课进度更新: enrollment_id={enrollment_id}, "
            f"completed={len(completed)}/{total_lessons}, progress={updated.progress}"
        )
        return updated

    def complete_enrollment(self, enrollment_id: int) -> Enrollment:
        """显式完成：将课程全部课时记为已完成，进度置为100"""
        with self.store.lock:
            enrollment = self.enrollment_repo.get_or_raise(enrollment_id)
            lesson_ids = {lesson.id for lesson in self.lesson_repo.list_by_course(enrollment.course_id)}
            completed = set(enrollment.completed_lessons) | lesson_ids
            updated = self._write_progress(enrollment, completed, 100)

        logger.info(f"选课已完成: enrollment_id={enrollment_id}")
        return updated

    def _write_progress(self, enrollment: Enrollment, completed: Set[int], progress: int) -> Enrollment:
        status: Optional[EnrollmentStatus] = None
        completed_at: Optional[datetime] = None

        # 完成状态不可回退，课程后续新增课时也保持100
        if enrollment.is_completed():
            progress = 100

        if progress == 100:
            status = EnrollmentStatus.COMPLETED
            completed_at = enrollment.completed_at or datetime.now()

        return self.enrollment_repo.update_progress(
            enrollment_id=enrollment.id,
            progress=progress,
            completed_lessons=completed,
            status=status,
            completed_at=completed_at
        )
