"""
仓库包初始化文件 - 内存数据访问层
"""

from .base import BaseRepository
from .user_repository import UserRepository
from .category_repository import CategoryRepository
from .course_repository import CourseRepository
from .lesson_repository import LessonRepository
from .enrollment_repository import EnrollmentRepository
from .payment_repository import PaymentRepository
from .review_repository import ReviewRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "CategoryRepository",
    "CourseRepository",
    "LessonRepository",
    "EnrollmentRepository",
    "PaymentRepository",
    "ReviewRepository"
]
