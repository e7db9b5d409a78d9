"""
课时数据访问层
"""

from typing import Any, Dict, List

from coursehub.core.exceptions import NotFoundError
from coursehub.core.store import MemoryStore
from coursehub.models.lesson import Lesson, LessonCreate, LessonUpdate
from coursehub.repositories.base import BaseRepository
from coursehub.repositories.course_repository import CourseRepository


class LessonRepository(BaseRepository[Lesson]):
    """课时数据访问层"""

    model = Lesson
    create_model = LessonCreate
    update_model = LessonUpdate
    collection_name = "lessons"
    entity_label = "课时"

    def __init__(self, store: MemoryStore):
        super().__init__(store)
        self.course_repo = CourseRepository(store)

    def list_by_course(self, course_id: int) -> List[Lesson]:
        """获取课程的课时，按order升序，相同order保持插入顺序"""
        lessons = self.filter(lambda lesson: lesson.course_id == course_id)
        return sorted(lessons, key=lambda lesson: lesson.order)

    def count_by_course(self, course_id: int) -> int:
        return sum(1 for lesson in self.collection if lesson.course_id == course_id)

    def _before_create(self, fields: Dict[str, Any]) -> None:
        if not self.course_repo.exists(fields["course_id"]):
            raise NotFoundError(f"课程不存在: {fields['course_id']}")

    def _after_create(self, entity: Lesson) -> None:
        course = self.course_repo.get_or_raise(entity.course_id)
        self.course_repo.update_course_stats(
            course_id=entity.course_id,
            new_lesson_count=course.lesson_count + 1
        )
