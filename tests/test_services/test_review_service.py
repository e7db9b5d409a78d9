"""
ReviewService课程评价测试
"""

import pytest
from unittest.mock import MagicMock

from coursehub.core.exceptions import (
    AuthenticationRequiredError,
    ConflictError,
    ForbiddenError,
    InconsistentStateError,
    InvalidInputError,
    NotFoundError
)
from coursehub.services.aggregation_service import AggregationService
from coursehub.services.review_service import ReviewService


@pytest.mark.asyncio
class TestReviewService:
    """ReviewService业务逻辑测试类"""

    @pytest.fixture
    def enrolled(self, enrollment_repo, student, another_student, course):
        """两名学员均已选课"""
        enrollment_repo.create({"user_id": student.id, "course_id": course.id})
        enrollment_repo.create({"user_id": another_student.id, "course_id": course.id})

    async def test_rating_recomputed_after_each_review(self, review_service, course_repo, enrolled, student, another_student, course):
        await review_service.create_review(student.id, course.id, 5, "非常实用")
        current = course_repo.get(course.id)
        assert current.rating == pytest.approx(5.0)
        assert current.review_count == 1

        await review_service.create_review(another_student.id, course.id, 2)
        current = course_repo.get(course.id)
        assert current.rating == pytest.approx(3.5)
        assert current.review_count == 2

    async def test_review_twice_conflicts(self, review_service, review_repo, course_repo, enrolled, student, course):
        """重复评价被拒绝，只保留一条评价且评分不变"""
        await review_service.create_review(student.id, course.id, 4)

        with pytest.raises(ConflictError):
            await review_service.create_review(student.id, course.id, 1)

        assert len(review_repo.list_by_course(course.id)) == 1
        assert course_repo.get(course.id).rating == pytest.approx(4.0)

    async def test_requires_user(self, review_service, course):
        with pytest.raises(AuthenticationRequiredError):
            await review_service.create_review(None, course.id, 5)

    async def test_rating_out_of_range(self, review_service, enrolled, student, course):
        for rating in [0, 6]:
            with pytest.raises(InvalidInputError):
                await review_service.create_review(student.id, course.id, rating)

    async def test_missing_course(self, review_service, student):
        with pytest.raises(NotFoundError):
            await review_service.create_review(student.id, 999, 5)

    async def test_not_enrolled_forbidden(self, review_service, review_repo, student, course):
        with pytest.raises(ForbiddenError):
            await review_service.create_review(student.id, course.id, 5)
        assert review_repo.count() == 0

    async def test_find_review(self, review_service, enrolled, student, another_student, course):
        review = await review_service.create_review(student.id, course.id, 3)

        assert await review_service.find_review(student.id, course.id) == review
        assert await review_service.find_review(another_student.id, course.id) is None

    async def test_list_course_reviews_joins_user(self, review_service, enrolled, student, another_student, course):
        await review_service.create_review(student.id, course.id, 5)
        await review_service.create_review(another_student.id, course.id, 4)

        results = await review_service.list_course_reviews(course.id)

        assert [item.user.username for item in results] == ["zhangsan", "lisi"]
        assert "password" not in results[0].model_dump()["user"]

    async def test_list_course_reviews_missing_user(self, review_service, store, enrolled, student, course):
        await review_service.create_review(student.id, course.id, 5)
        store.users._items.pop(student.id)

        with pytest.raises(InconsistentStateError):
            await review_service.list_course_reviews(course.id)

    async def test_recompute_called_with_course(self, store, enrolled, student, course):
        aggregation = MagicMock(spec=AggregationService)
        service = ReviewService(store, aggregation)

        await service.create_review(student.id, course.id, 5)

        aggregation.recompute_course_rating.assert_called_once_with(course.id)
