"""
课程目录业务服务层
提供分类、课程、课时的查询与维护
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from coursehub.core.exceptions import BusinessException, invalid_input_from
from coursehub.core.store import MemoryStore
from coursehub.models.category import Category, CategoryCreate, CategoryUpdate
from coursehub.models.course import Course, CourseCreate, CourseFilter, CourseUpdate
from coursehub.models.lesson import Lesson, LessonCreate, LessonUpdate
from coursehub.repositories.category_repository import CategoryRepository
from coursehub.repositories.course_repository import CourseRepository
from coursehub.repositories.lesson_repository import LessonRepository

logger = logging.getLogger(__name__)


class CatalogService:
    """课程目录业务服务"""

    def __init__(self, store: MemoryStore):
        self.store = store
        self.category_repo = CategoryRepository(store)
        self.course_repo = CourseRepository(store)
        self.lesson_repo = LessonRepository(store)

    # 课程查询

    async def list_courses(
        self,
        course_filter: Optional[Union[CourseFilter, Dict[str, Any]]] = None
    ) -> List[Course]:
        """按过滤条件查询课程，条件取交集"""
        if course_filter is None:
            course_filter = CourseFilter()
        elif not isinstance(course_filter, CourseFilter):
            try:
                course_filter = CourseFilter(**course_filter)
            except ValidationError as e:
                logger.warning(f"课程过滤条件无效: {e}")
                raise invalid_input_from(e, "课程过滤条件无效")

        courses = self.course_repo.search_courses(course_filter)
        logger.debug(f"课程查询: filter={course_filter.model_dump(exclude_none=True)}, count={len(courses)}")
        return courses

    async def list_featured_courses(self) -> List[Course]:
        """获取推荐课程"""
        return self.course_repo.list_featured()

    async def get_course(self, course_id: int) -> Optional[Course]:
        """获取课程详情"""
        return self.course_repo.get(course_id)

    async def get_course_by_slug(self, slug: str) -> Optional[Course]:
        """根据slug获取课程"""
        return self.course_repo.get_by_slug(slug)

    async def list_courses_in_category(self, category_id: int) -> List[Course]:
        """根据分类获取课程"""
        return self.course_repo.list_by_category(category_id)

    async def list_courses_by_instructor(self, instructor_id: int) -> List[Course]:
        """获取讲师的全部课程"""
        return self.course_repo.list_by_instructor(instructor_id)

    async def get_price_range(self) -> Dict[str, Optional[Decimal]]:
        """获取目录内实际售价的范围"""
        prices = [course.effective_price for course in self.course_repo.list_all()]
        if not prices:
            return {"min_price": None, "max_price": None}
        return {"min_price": min(prices), "max_price": max(prices)}

    # 分类

    async def list_categories(self) -> List[Category]:
        """获取全部分类"""
        return self.category_repo.list_all()

    async def get_category(self, category_id: int) -> Optional[Category]:
        return self.category_repo.get(category_id)

    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return self.category_repo.get_by_slug(slug)

    async def create_category(self, category_data: Union[CategoryCreate, Dict[str, Any]]) -> Category:
        """创建分类"""
        try:
            return self.category_repo.create(category_data)
        except BusinessException as e:
            logger.warning(f"创建分类失败: {e}")
            raise

    async def update_category(
        self,
        category_id: int,
        update_data: Union[CategoryUpdate, Dict[str, Any]]
    ) -> Category:
        """更新分类"""
        try:
            return self.category_repo.update(category_id, update_data)
        except BusinessException as e:
            logger.warning(f"更新分类失败 category_id={category_id}: {e}")
            raise

    # 课程维护

    async def create_course(self, course_data: Union[CourseCreate, Dict[str, Any]]) -> Course:
        """创建课程，所属分类的课程数量同步加一"""
        try:
            course = self.course_repo.create(course_data)
        except BusinessException as e:
            logger.warning(f"创建课程失败: {e}")
            raise

        logger.info(f"课程已上架: course_id={course.id}, slug={course.slug}")
        return course

    async def update_course(
        self,
        course_id: int,
        update_data: Union[CourseUpdate, Dict[str, Any]]
    ) -> Course:
        """更新课程"""
        try:
            return self.course_repo.update(course_id, update_data)
        except BusinessException as e:
            logger.warning(f"更新课程失败 course_id={course_id}: {e}")
            raise

    # 课时

    async def list_lessons_for_course(self, course_id: int) -> List[Lesson]:
        """按顺序号升序获取课程的课时"""
        return self.lesson_repo.list_by_course(course_id)

    async def get_lesson(self, lesson_id: int) -> Optional[Lesson]:
        return self.lesson_repo.get(lesson_id)

    async def create_lesson(self, lesson_data: Union[LessonCreate, Dict[str, Any]]) -> Lesson:
        """创建课时，课程的课时数量同步加一"""
        try:
            return self.lesson_repo.create(lesson_data)
        except BusinessException as e:
            logger.warning(f"创建课时失败: {e}")
            raise

    async def update_lesson(
        self,
        lesson_id: int,
        update_data: Union[LessonUpdate, Dict[str, Any]]
    ) -> Lesson:
        """更新课时"""
        try:
            return self.lesson_repo.update(lesson_id, update_data)
        except BusinessException as e:
            logger.warning(f"更新课时失败 lesson_id={lesson_id}: {e}")
            raise
