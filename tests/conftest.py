"""
测试配置文件 - pytest fixtures和共用配置
每个测试使用独立的内存存储
"""

import pytest
from decimal import Decimal

from coursehub.core.config import Settings
from coursehub.core.store import MemoryStore
from coursehub.models.category import CategoryCreate
from coursehub.models.course import CourseCreate, CourseLevel
from coursehub.models.lesson import LessonCreate
from coursehub.models.user import UserCreate, UserRole
from coursehub.repositories import (
    CategoryRepository,
    CourseRepository,
    EnrollmentRepository,
    LessonRepository,
    PaymentRepository,
    ReviewRepository,
    UserRepository
)
from coursehub.services import (
    AggregationService,
    CatalogService,
    EnrollmentService,
    PaymentService,
    ReviewService,
    UserService
)


# 配置pytest-asyncio
pytest_plugins = ('pytest_asyncio',)


@pytest.fixture
def test_settings():
    """测试配置，不读取.env"""
    return Settings(_env_file=None, seed_demo_data=False, log_level="DEBUG")


@pytest.fixture
def store():
    """独立的内存存储"""
    return MemoryStore()


# 仓库

@pytest.fixture
def user_repo(store):
    return UserRepository(store)


@pytest.fixture
def category_repo(store):
    return CategoryRepository(store)


@pytest.fixture
def course_repo(store):
    return CourseRepository(store)


@pytest.fixture
def lesson_repo(store):
    return LessonRepository(store)


@pytest.fixture
def enrollment_repo(store):
    return EnrollmentRepository(store)


@pytest.fixture
def payment_repo(store):
    return PaymentRepository(store)


@pytest.fixture
def review_repo(store):
    return ReviewRepository(store)


# 服务

@pytest.fixture
def aggregation_service(store):
    return AggregationService(store)


@pytest.fixture
def catalog_service(store):
    return CatalogService(store)


@pytest.fixture
def user_service(store):
    return UserService(store)


@pytest.fixture
def enrollment_service(store, aggregation_service):
    return EnrollmentService(store, aggregation_service)


@pytest.fixture
def review_service(store, aggregation_service):
    return ReviewService(store, aggregation_service)


@pytest.fixture
def payment_service(store, enrollment_service):
    return PaymentService(store, enrollment_service=enrollment_service)


# 示例数据

@pytest.fixture
def instructor(user_repo):
    """示例讲师"""
    return user_repo.create(UserCreate(
        username="davidmitchell",
        password="password123",
        email="david@example.com",
        first_name="David",
        last_name="Mitchell",
        role=UserRole.INSTRUCTOR
    ))


@pytest.fixture
def student(user_repo):
    """示例学员"""
    return user_repo.create(UserCreate(
        username="zhangsan",
        password="secret",
        email="zhangsan@example.com",
        first_name="San",
        last_name="Zhang"
    ))


@pytest.fixture
def another_student(user_repo):
    return user_repo.create(UserCreate(username="lisi", password="secret", email="lisi@example.com"))


@pytest.fixture
def category(category_repo):
    """示例分类"""
    return category_repo.create(CategoryCreate(
        name="Programming",
        slug="programming",
        description="Learn programming languages and coding skills",
        icon="fas fa-laptop-code"
    ))


@pytest.fixture
def course(course_repo, category, instructor):
    """示例课程，价格89.99，无折扣"""
    return course_repo.create(CourseCreate(
        title="Complete Web Development Bootcamp",
        slug="web-development-bootcamp",
        description="Learn HTML, CSS, JavaScript, React and Node.js.",
        price=Decimal("89.99"),
        instructor_id=instructor.id,
        category_id=category.id,
        level=CourseLevel.BEGINNER,
        is_featured=True
    ))


@pytest.fixture
def lessons(lesson_repo, course):
    """示例课程的5个课时"""
    return [
        lesson_repo.create(LessonCreate(
            title=f"Web Development Lesson {i}",
            course_id=course.id,
            duration=30,
            order=i
        ))
        for i in range(1, 6)
    ]


@pytest.fixture
def enrollment(enrollment_repo, student, course):
    """学员对示例课程的选课记录"""
    return enrollment_repo.create({"user_id": student.id, "course_id": course.id})
