"""
选课记录数据模型测试
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from coursehub.models.course import Course
from coursehub.models.enrollment import Enrollment, EnrollmentStatus, EnrollmentWithCourse


class TestEnrollmentModel:
    """选课记录模型测试"""

    def test_defaults(self):
        enrollment = Enrollment(id=1, user_id=1, course_id=1)
        assert enrollment.status == EnrollmentStatus.ACTIVE
        assert enrollment.progress == 0
        assert enrollment.completed_lessons == set()
        assert enrollment.completed_at is None
        assert not enrollment.is_completed()

    def test_progress_bounds(self):
        with pytest.raises(ValidationError):
            Enrollment(id=1, user_id=1, course_id=1, progress=101)
        with pytest.raises(ValidationError):
            Enrollment(id=1, user_id=1, course_id=1, progress=-1)

    def test_completed_lessons_deduplicated(self):
        enrollment = Enrollment(id=1, user_id=1, course_id=1, completed_lessons=[3, 3, 4])
        assert enrollment.completed_lessons == {3, 4}

    def test_from_enrollment(self):
        enrollment = Enrollment(id=7, user_id=2, course_id=3, progress=40, completed_lessons={1, 2})
        course = Course(id=3, title="UX/UI Design Principles", slug="ux-ui-design-principles", price=Decimal("99.99"))

        joined = EnrollmentWithCourse.from_enrollment(enrollment, course)

        assert joined.id == 7
        assert joined.progress == 40
        assert joined.completed_lessons == {1, 2}
        assert joined.course.title == "UX/UI Design Principles"
