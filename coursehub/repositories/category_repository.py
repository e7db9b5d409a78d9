"""
课程分类数据访问层
"""

import logging
from typing import Any, Dict, Optional

from coursehub.models.category import Category, CategoryCreate, CategoryUpdate
from coursehub.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class CategoryRepository(BaseRepository[Category]):
    """课程分类数据访问层"""

    model = Category
    create_model = CategoryCreate
    update_model = CategoryUpdate
    collection_name = "categories"
    entity_label = "分类"

    def get_by_slug(self, slug: str) -> Optional[Category]:
        """根据slug获取分类"""
        return self.find_one(lambda category: category.slug == slug)

    def increment_course_count(self, category_id: int, step: int = 1) -> Category:
        """课程数量计数加一（只增不减）"""
        with self.store.lock:
            category = self.get_or_raise(category_id)
            updated = self._apply(category_id, course_count=category.course_count + step)

        logger.info(f"分类课程数量更新: id={category_id}, course_count={updated.course_count}")
        return updated

    def _before_create(self, fields: Dict[str, Any]) -> None:
        self._ensure_unique("name", fields["name"], label="分类名称")
        self._ensure_unique("slug", fields["slug"], label="分类slug")

    def _before_update(self, current: Category, changes: Dict[str, Any]) -> None:
        if "name" in changes:
            self._ensure_unique("name", changes["name"], exclude_id=current.id, label="分类名称")
        if "slug" in changes:
            self._ensure_unique("slug", changes["slug"], exclude_id=current.id, label="分类slug")
