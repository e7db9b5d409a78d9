"""
课程数据模型测试
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from coursehub.models.course import (
    Course,
    CourseCreate,
    CourseFilter,
    CourseLevel,
    CourseUpdate,
    compute_effective_price
)


def make_course(**overrides):
    data = {
        "id": 1,
        "title": "Python基础课程",
        "slug": "python-basics",
        "description": "学习Python编程基础",
        "price": Decimal("100.00"),
    }
    data.update(overrides)
    return Course(**data)


class TestEffectivePrice:
    """实际售价计算测试"""

    def test_no_discount(self):
        assert compute_effective_price(Decimal("89.99"), None) == Decimal("89.99")

    def test_lower_discount_applies(self):
        assert compute_effective_price(Decimal("120"), Decimal("90")) == Decimal("90")

    def test_discount_not_lower_is_ignored(self):
        """折扣价不低于原价时按原价计算"""
        assert compute_effective_price(Decimal("80"), Decimal("80")) == Decimal("80")
        assert compute_effective_price(Decimal("80"), Decimal("95")) == Decimal("80")

    def test_course_property_and_discount_percentage(self):
        course = make_course(price=Decimal("200"), discount_price=Decimal("150"))
        assert course.effective_price == Decimal("150")
        assert course.get_discount_percentage() == pytest.approx(0.25)

    def test_discount_percentage_free_course(self):
        assert make_course(price=Decimal("0")).get_discount_percentage() == 0.0


class TestCourseModel:
    """课程模型测试"""

    def test_defaults(self):
        course = make_course()
        assert course.rating == 0.0
        assert course.review_count == 0
        assert course.lesson_count == 0
        assert course.level == CourseLevel.BEGINNER
        assert course.is_featured is False

    def test_invalid_slug(self):
        with pytest.raises(ValidationError):
            CourseCreate(title="课程", slug="Not A Slug", price=Decimal("10"))

    def test_negative_price(self):
        with pytest.raises(ValidationError):
            CourseCreate(title="课程", slug="course", price=Decimal("-1"))

    def test_update_excludes_derived_fields(self):
        """评分、评价数、课时数不能通过更新载荷修改"""
        assert "rating" not in CourseUpdate.model_fields
        assert "review_count" not in CourseUpdate.model_fields
        assert "lesson_count" not in CourseUpdate.model_fields


class TestCourseFilter:
    """课程过滤条件测试"""

    def test_blank_search_is_ignored(self):
        assert CourseFilter(search="   ").search is None

    def test_search_is_stripped(self):
        assert CourseFilter(search="  python ").search == "python"

    def test_min_greater_than_max_rejected(self):
        with pytest.raises(ValidationError):
            CourseFilter(min_price=Decimal("100"), max_price=Decimal("50"))

    def test_negative_bound_rejected(self):
        with pytest.raises(ValidationError):
            CourseFilter(min_price=Decimal("-5"))

    def test_empty_filter_matches_everything(self):
        assert CourseFilter().matches(make_course())

    def test_search_matches_title_or_description(self):
        course = make_course(title="Data Science", description="Master PYTHON and pandas")
        assert CourseFilter(search="science").matches(course)
        assert CourseFilter(search="python").matches(course)
        assert not CourseFilter(search="javascript").matches(course)

    def test_search_with_missing_description(self):
        course = make_course(title="Design", description=None)
        assert not CourseFilter(search="python").matches(course)

    def test_price_bounds_use_effective_price(self):
        """价格区间按实际售价判断，边界包含"""
        discounted = make_course(price=Decimal("120"), discount_price=Decimal("90"))
        course_filter = CourseFilter(min_price=Decimal("50"), max_price=Decimal("100"))

        assert course_filter.matches(discounted)
        assert course_filter.matches(make_course(price=Decimal("100")))
        assert course_filter.matches(make_course(price=Decimal("50")))
        assert not course_filter.matches(make_course(price=Decimal("100.01")))

    def test_level_and_category(self):
        course = make_course(level=CourseLevel.ADVANCED, category_id=3)
        assert CourseFilter(level=CourseLevel.ADVANCED, category_id=3).matches(course)
        assert not CourseFilter(level=CourseLevel.BEGINNER).matches(course)
        assert not CourseFilter(category_id=4).matches(course)
