"""
数据模型包初始化文件
"""

from .user import User, UserCreate, UserUpdate, UserRole
from .category import Category, CategoryCreate, CategoryUpdate
from .course import (
    Course,
    CourseCreate,
    CourseUpdate,
    CourseFilter,
    CourseLevel,
    compute_effective_price
)
from .lesson import Lesson, LessonCreate, LessonUpdate
from .enrollment import (
    Enrollment,
    EnrollmentCreate,
    EnrollmentUpdate,
    EnrollmentStatus,
    EnrollmentWithCourse
)
from .payment import Payment, PaymentCreate, PaymentUpdate, PaymentStatus
from .review import Review, ReviewCreate, ReviewWithUser

__all__ = [
    "User",
    "UserCreate",
    "UserUpdate",
    "UserRole",
    "Category",
    "CategoryCreate",
    "CategoryUpdate",
    "Course",
    "CourseCreate",
    "CourseUpdate",
    "CourseFilter",
    "CourseLevel",
    "compute_effective_price",
    "Lesson",
    "LessonCreate",
    "LessonUpdate",
    "Enrollment",
    "EnrollmentCreate",
    "EnrollmentUpdate",
    "EnrollmentStatus",
    "EnrollmentWithCourse",
    "Payment",
    "PaymentCreate",
    "PaymentUpdate",
    "PaymentStatus",
    "Review",
    "ReviewCreate",
    "ReviewWithUser"
]
