"""
选课、支付、评价仓库测试
"""

import pytest
from decimal import Decimal

from coursehub.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from coursehub.models.enrollment import EnrollmentStatus
from coursehub.models.payment import PaymentCreate, PaymentStatus
from coursehub.models.review import ReviewCreate


class TestEnrollmentRepository:
    """选课仓库测试"""

    def test_create_defaults(self, enrollment):
        assert enrollment.status == EnrollmentStatus.ACTIVE
        assert enrollment.progress == 0
        assert enrollment.completed_lessons == set()

    def test_pair_unique(self, enrollment_repo, enrollment, student, course):
        with pytest.raises(ConflictError):
            enrollment_repo.create({"user_id": student.id, "course_id": course.id})

    def test_missing_references(self, enrollment_repo, student, course):
        with pytest.raises(NotFoundError):
            enrollment_repo.create({"user_id": student.id, "course_id": 99})
        with pytest.raises(NotFoundError):
            enrollment_repo.create({"user_id": 99, "course_id": course.id})

    def test_find_and_list(self, enrollment_repo, enrollment, student, course, another_student):
        assert enrollment_repo.find(student.id, course.id).id == enrollment.id
        assert enrollment_repo.find(another_student.id, course.id) is None
        assert [e.id for e in enrollment_repo.list_by_user(student.id)] == [enrollment.id]
        assert [e.id for e in enrollment_repo.list_by_course(course.id)] == [enrollment.id]

    def test_update_progress(self, enrollment_repo, enrollment):
        updated = enrollment_repo.update_progress(enrollment.id, progress=40, completed_lessons={1, 2})
        assert updated.progress == 40
        assert updated.completed_lessons == {1, 2}
        assert updated.status == EnrollmentStatus.ACTIVE


class TestPaymentRepository:
    """支付仓库测试"""

    def make_payment(self, payment_repo, student, course, reference="pi_001"):
        return payment_repo.create(PaymentCreate(
            user_id=student.id,
            course_id=course.id,
            amount=Decimal("89.99"),
            payment_reference=reference
        ))

    def test_reference_unique(self, payment_repo, student, course):
        self.make_payment(payment_repo, student, course)
        with pytest.raises(ConflictError):
            self.make_payment(payment_repo, student, course)

    def test_update_status_by_reference(self, payment_repo, student, course):
        payment = self.make_payment(payment_repo, student, course)
        updated = payment_repo.update_status_by_reference("pi_001", PaymentStatus.COMPLETED)
        assert updated.id == payment.id
        assert updated.is_paid()

    def test_update_status_unknown_reference(self, payment_repo):
        with pytest.raises(NotFoundError):
            payment_repo.update_status_by_reference("pi_missing", PaymentStatus.FAILED)

    def test_list_by_user(self, payment_repo, student, course):
        self.make_payment(payment_repo, student, course, "pi_1")
        self.make_payment(payment_repo, student, course, "pi_2")
        assert [p.payment_reference for p in payment_repo.list_by_user(student.id)] == ["pi_1", "pi_2"]


class TestReviewRepository:
    """评价仓库测试"""

    def test_pair_unique(self, review_repo, student, course):
        review_repo.create(ReviewCreate(user_id=student.id, course_id=course.id, rating=4))
        with pytest.raises(ConflictError):
            review_repo.create(ReviewCreate(user_id=student.id, course_id=course.id, rating=5))

    def test_reviews_immutable(self, review_repo, student, course):
        review = review_repo.create(ReviewCreate(user_id=student.id, course_id=course.id, rating=4))
        with pytest.raises(ForbiddenError):
            review_repo.update(review.id, {"rating": 1})
