"""
演示课程目录数据写入脚本

运行方式:
python -m coursehub.scripts.seed_demo_data
"""

import asyncio
import logging
from decimal import Decimal
from typing import Dict

from coursehub.models.category import CategoryCreate
from coursehub.models.course import CourseCreate, CourseLevel
from coursehub.models.lesson import LessonCreate
from coursehub.models.user import UserCreate, UserRole
from coursehub.services.catalog_service import CatalogService
from coursehub.services.user_service import UserService

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

DEMO_INSTRUCTORS = [
    {"username": "davidmitchell", "email": "david@example.com", "first_name": "David", "last_name": "Mitchell"},
    {"username": "sarahjohnson", "email": "sarah@example.com", "first_name": "Sarah", "last_name": "Johnson"},
    {"username": "michaelcarter", "email": "michael@example.com", "first_name": "Michael", "last_name": "Carter"},
    {"username": "jessicalee", "email": "jessica@example.com", "first_name": "Jessica", "last_name": "Lee"},
]

DEMO_CATEGORIES = [
    {"name": "Programming", "slug": "programming",
     "description": "Learn programming languages and coding skills", "icon": "fas fa-laptop-code"},
    {"name": "Business", "slug": "business",
     "description": "Business, entrepreneurship, and management courses", "icon": "fas fa-chart-line"},
    {"name": "Design", "slug": "design",
     "description": "Graphic design, UX/UI, and creative courses", "icon": "fas fa-palette"},
    {"name": "Marketing", "slug": "marketing",
     "description": "Digital marketing, SEO, and promotion strategies", "icon": "fas fa-bullhorn"},
    {"name": "Photography", "slug": "photography",
     "description": "Photography, videography, and visual arts", "icon": "fas fa-camera"},
    {"name": "Health", "slug": "health",
     "description": "Health, fitness, and wellness courses", "icon": "fas fa-heartbeat"},
]

# (课程数据, 讲师用户名, 分类slug, 课时标题前缀, 课时简介前缀, 单课时长)
DEMO_COURSES = [
    (
        {
            "title": "Complete Web Development Bootcamp",
            "slug": "web-development-bootcamp",
            "description": "Learn HTML, CSS, JavaScript, React and Node.js in this comprehensive course.",
            "price": Decimal("89.99"),
            "thumbnail": "https://images.unsplash.com/photo-1498050108023-c5249f4df085",
            "lesson_count": 64,
            "duration": 2520,
            "level": CourseLevel.BEGINNER,
            "is_bestseller": True,
        },
        "davidmitchell", "programming", "Web Development", "Introduction to Web Development", 30
    ),
    (
        {
            "title": "Data Science and Machine Learning",
            "slug": "data-science-machine-learning",
            "description": "Master Python, data analysis, and machine learning algorithms.",
            "price": Decimal("119.99"),
            "thumbnail": "https://images.unsplash.com/photo-1551288049-bebda4e38f71",
            "lesson_count": 82,
            "duration": 3360,
            "level": CourseLevel.INTERMEDIATE,
        },
        "sarahjohnson", "programming", "Data Science", "Introduction to Data Science", 45
    ),
    (
        {
            "title": "Digital Marketing Masterclass",
            "slug": "digital-marketing-masterclass",
            "description": "Learn SEO, social media marketing, email campaigns and more.",
            "price": Decimal("79.99"),
            "thumbnail": "https://images.unsplash.com/photo-1606857521015-7f9fcf423740",
            "lesson_count": 58,
            "duration": 2280,
            "level": CourseLevel.BEGINNER,
            "is_new": True,
        },
        "michaelcarter", "marketing", "Marketing", "Introduction to Digital Marketing", 35
    ),
    (
        {
            "title": "UX/UI Design Principles",
            "slug": "ux-ui-design-principles",
            "description": "Create user-centered designs and improve your design thinking skills.",
            "price": Decimal("99.99"),
            "thumbnail": "https://images.unsplash.com/photo-1587440871875-191322ee64b0",
            "lesson_count": 47,
            "duration": 1920,
            "level": CourseLevel.BEGINNER,
        },
        "jessicalee", "design", "UX/UI Design", "Introduction to UX/UI Design", 40
    ),
]

LESSONS_PER_COURSE = 5


async def seed_demo_data(user_service: UserService, catalog_service: CatalogService) -> Dict[str, int]:
    """写入演示讲师、分类、推荐课程及课时，返回各类数据的写入数量"""
    logger.info("开始写入演示数据...")

    instructors = {}
    for instructor in DEMO_INSTRUCTORS:
        user = await user_service.register_user(
            UserCreate(password=DEMO_PASSWORD, role=UserRole.INSTRUCTOR, **instructor)
        )
        instructors[user.username] = user.id

    categories = {}
    for category_data in DEMO_CATEGORIES:
        category = await catalog_service.create_category(CategoryCreate(**category_data))
        categories[category.slug] = category.id

    lesson_total = 0
    for course_data, instructor, category_slug, lesson_title, lesson_intro, lesson_duration in DEMO_COURSES:
        course = await catalog_service.create_course(CourseCreate(
            instructor_id=instructors[instructor],
            category_id=categories[category_slug],
            is_featured=True,
            **course_data
        ))

        for i in range(1, LESSONS_PER_COURSE + 1):
            await catalog_service.create_lesson(LessonCreate(
                title=f"{lesson_title} Lesson {i}",
                description=f"{lesson_intro} - Part {i}",
                content="Lesson content goes here...",
                course_id=course.id,
                duration=lesson_duration,
                order=i
            ))
            lesson_total += 1

    summary = {
        "users": len(instructors),
        "categories": len(categories),
        "courses": len(DEMO_COURSES),
        "lessons": lesson_total,
    }
    logger.info(f"演示数据写入完成: {summary}")
    return summary


async def main():
    from coursehub.core.config import settings
    from coursehub.main import create_marketplace

    marketplace = await create_marketplace(settings.model_copy(update={"seed_demo_data": True}))
    print(f"当前存储统计: {marketplace.store.stats()}")


if __name__ == "__main__":
    asyncio.run(main())
