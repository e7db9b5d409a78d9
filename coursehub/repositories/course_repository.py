"""
课程数据访问层
"""

from typing import Any, Dict, List, Optional
from datetime import datetime

from coursehub.core.exceptions import NotFoundError
from coursehub.core.store import MemoryStore
from coursehub.models.course import Course, CourseCreate, CourseFilter, CourseUpdate
from coursehub.repositories.base import BaseRepository
from coursehub.repositories.category_repository import CategoryRepository


class CourseRepository(BaseRepository[Course]):
    """课程数据访问层"""

    model = Course
    create_model = CourseCreate
    update_model = CourseUpdate
    collection_name = "courses"
    entity_label = "课程"

    def __init__(self, store: MemoryStore):
        super().__init__(store)
        self.category_repo = CategoryRepository(store)

    def get_by_slug(self, slug: str) -> Optional[Course]:
        """根据slug获取课程"""
        return self.find_one(lambda course: course.slug == slug)

    def search_courses(self, course_filter: CourseFilter) -> List[Course]:
        """按过滤条件查询课程，保持插入顺序"""
        return self.filter(course_filter.matches)

    def list_featured(self) -> List[Course]:
        """获取推荐课程"""
        return self.filter(lambda course: course.is_featured)

    def list_by_category(self, category_id: int) -> List[Course]:
        """根据分类获取课程列表"""
        return self.filter(lambda course: course.category_id == category_id)

    def list_by_instructor(self, instructor_id: int) -> List[Course]:
        """根据讲师获取课程列表"""
        return self.filter(lambda course: course.instructor_id == instructor_id)

    def update(self, entity_id: int, data) -> Course:
        """更新课程，同时刷新更新时间"""
        with self.store.lock:
            super().update(entity_id, data)
            return self._apply(entity_id, updated_at=datetime.now())

    def update_course_stats(
        self,
        course_id: int,
        new_rating: Optional[float] = None,
        new_review_count: Optional[int] = None,
        new_lesson_count: Optional[int] = None
    ) -> Course:
        """更新课程统计信息（派生字段）"""
        update_data: Dict[str, Any] = {"updated_at": datetime.now()}

        if new_rating is not None:
            update_data["rating"] = new_rating
        if new_review_count is not None:
            update_data["review_count"] = new_review_count
        if new_lesson_count is not None:
            update_data["lesson_count"] = new_lesson_count

        return self._apply(course_id, **update_data)

    def _check_references(self, fields: Dict[str, Any]) -> None:
        category_id = fields.get("category_id")
        if category_id is not None and not self.category_repo.exists(category_id):
            raise NotFoundError(f"分类不存在: {category_id}")

        instructor_id = fields.get("instructor_id")
        if instructor_id is not None and instructor_id not in self.store.users:
            raise NotFoundError(f"讲师不存在: {instructor_id}")

    def _before_create(self, fields: Dict[str, Any]) -> None:
        self._ensure_unique("slug", fields["slug"], label="课程slug")
        self._check_references(fields)

    def _after_create(self, entity: Course) -> None:
        if entity.category_id is not None:
            self.category_repo.increment_course_count(entity.category_id)

    def _before_update(self, current: Course, changes: Dict[str, Any]) -> None:
        if "slug" in changes:
            self._ensure_unique("slug", changes["slug"], exclude_id=current.id, label="课程slug")
        self._check_references(changes)
