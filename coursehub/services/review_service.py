"""
课程评价服务
只有已选课的用户可以评价，每个用户对每门课程只能评价一次，
评价创建后同步重算课程评分
"""

import logging
from typing import List, Optional

from pydantic import ValidationError

from coursehub.core.exceptions import (
    BusinessException,
    ForbiddenError,
    InconsistentStateError,
    invalid_input_from,
    require_user_id
)
from coursehub.core.store import MemoryStore
from coursehub.models.review import Review, ReviewCreate, ReviewWithUser
from coursehub.repositories.course_repository import CourseRepository
from coursehub.repositories.enrollment_repository import EnrollmentRepository
from coursehub.repositories.review_repository import ReviewRepository
from coursehub.repositories.user_repository import UserRepository
from coursehub.services.aggregation_service import AggregationService

logger = logging.getLogger(__name__)


class ReviewService:
    """课程评价业务服务"""

    def __init__(self, store: MemoryStore, aggregation: Optional[AggregationService] = None):
        self.store = store
        self.review_repo = ReviewRepository(store)
        self.course_repo = CourseRepository(store)
        self.enrollment_repo = EnrollmentRepository(store)
        self.user_repo = UserRepository(store)
        self.aggregation = aggregation or AggregationService(store)

    async def create_review(
        self,
        user_id: Optional[int],
        course_id: int,
        rating: int,
        comment: Optional[str] = None
    ) -> Review:
        """创建评价并重算课程评分"""
        user_id = require_user_id(user_id)

        try:
            payload = ReviewCreate(user_id=user_id, course_id=course_id, rating=rating, comment=comment)
        except ValidationError as e:
            logger.warning(f"评价参数无效 user_id={user_id}, course_id={course_id}: {e}")
            raise invalid_input_from(e, "评价字段校验失败")

        try:
            with self.store.lock:
                self.course_repo.get_or_raise(course_id)
                if self.enrollment_repo.find(user_id, course_id) is None:
                    raise ForbiddenError(f"未选课用户不能评价课程: course_id={course_id}")

                review = self.review_repo.create(payload)
                self.aggregation.recompute_course_rating(course_id)
        except BusinessException as e:
            logger.warning(f"创建评价失败 user_id={user_id}, course_id={course_id}: {e}")
            raise

        logger.info(f"评价创建成功: review_id={review.id}, course_id={course_id}, rating={rating}")
        return review

    async def find_review(self, user_id: int, course_id: int) -> Optional[Review]:
        """按(用户, 课程)查找评价"""
        return self.review_repo.find(user_id, course_id)

    async def list_course_reviews(self, course_id: int) -> List[ReviewWithUser]:
        """获取课程评价及评价用户"""
        reviews = self.review_repo.list_by_course(course_id)
        users = self.user_repo.get_many([review.user_id for review in reviews])

        results = []
        for review in reviews:
            user = users.get(review.user_id)
            if user is None:
                logger.error(f"评价引用的用户缺失: review_id={review.id}, user_id={review.user_id}")
                raise InconsistentStateError(f"评价引用的用户不存在: {review.user_id}")
            results.append(ReviewWithUser.from_review(review, user))
        return results
