"""
课程相关数据模型
"""

from decimal import Decimal
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, validator
from enum import Enum

from coursehub.models.category import SLUG_PATTERN


class CourseLevel(str, Enum):
    """难度等级枚举"""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


def compute_effective_price(price: Decimal, discount_price: Optional[Decimal]) -> Decimal:
    """实际售价：存在且低于原价的折扣价，否则为原价"""
    if discount_price is not None and discount_price < price:
        return discount_price
    return price


class Course(BaseModel):
    """课程基础模型"""

    id: int = Field(..., ge=1, description="课程唯一标识")
    title: str = Field(..., min_length=1, max_length=200, description="课程标题")
    slug: str = Field(..., pattern=SLUG_PATTERN, description="课程slug")
    description: Optional[str] = Field(None, max_length=5000, description="课程描述")
    price: Decimal = Field(..., ge=0, description="课程原价")
    discount_price: Optional[Decimal] = Field(None, ge=0, description="折扣价")
    thumbnail: Optional[str] = Field(None, description="封面图")
    instructor_id: Optional[int] = Field(None, ge=1, description="讲师用户ID")
    category_id: Optional[int] = Field(None, ge=1, description="分类ID")
    rating: float = Field(default=0.0, ge=0, le=5, description="平均评分")
    review_count: int = Field(default=0, ge=0, description="评价数量")
    lesson_count: int = Field(default=0, ge=0, description="课时数量")
    duration: int = Field(default=0, ge=0, description="课程总时长(分钟)")
    level: CourseLevel = Field(default=CourseLevel.BEGINNER, description="难度等级")
    is_featured: bool = Field(default=False, description="是否推荐")
    is_bestseller: bool = Field(default=False, description="是否畅销")
    is_new: bool = Field(default=False, description="是否新课")
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def effective_price(self) -> Decimal:
        """实际售价"""
        return compute_effective_price(self.price, self.discount_price)

    def get_discount_percentage(self) -> float:
        """计算折扣百分比"""
        if self.price == 0:
            return 0.0
        return float((self.price - self.effective_price) / self.price)


class CourseCreate(BaseModel):
    """创建课程数据模型"""

    title: str = Field(..., min_length=1, max_length=200)
    slug: str = Field(..., pattern=SLUG_PATTERN)
    description: Optional[str] = Field(None, max_length=5000)
    price: Decimal = Field(..., ge=0)
    discount_price: Optional[Decimal] = Field(None, ge=0)
    thumbnail: Optional[str] = None
    instructor_id: Optional[int] = Field(None, ge=1)
    category_id: Optional[int] = Field(None, ge=1)
    lesson_count: int = Field(default=0, ge=0)
    duration: int = Field(default=0, ge=0)
    level: CourseLevel = Field(default=CourseLevel.BEGINNER)
    is_featured: bool = False
    is_bestseller: bool = False
    is_new: bool = False


class CourseUpdate(BaseModel):
    """更新课程数据模型 - 评分、评价数、课时数为派生字段，不允许直接修改"""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, pattern=SLUG_PATTERN)
    description: Optional[str] = Field(None, max_length=5000)
    price: Optional[Decimal] = Field(None, ge=0)
    discount_price: Optional[Decimal] = Field(None, ge=0)
    thumbnail: Optional[str] = None
    instructor_id: Optional[int] = Field(None, ge=1)
    duration: Optional[int] = Field(None, ge=0)
    level: Optional[CourseLevel] = None
    is_featured: Optional[bool] = None
    is_bestseller: Optional[bool] = None
    is_new: Optional[bool] = None


class CourseFilter(BaseModel):
    """课程列表过滤条件，所有条件取交集，未提供的条件不做约束"""

    category_id: Optional[int] = Field(None, ge=1, description="按分类精确匹配")
    search: Optional[str] = Field(None, description="标题或描述的不区分大小写子串匹配")
    min_price: Optional[Decimal] = Field(None, ge=0, description="实际售价下限(含)")
    max_price: Optional[Decimal] = Field(None, ge=0, description="实际售价上限(含)")
    level: Optional[CourseLevel] = Field(None, description="按难度精确匹配")

    class Config:
        extra = "forbid"

    @validator('search')
    def normalize_search(cls, v):
        """空白关键词视为未提供"""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @validator('max_price')
    def validate_price_range(cls, v, values):
        """验证价格范围"""
        if v is not None and values.get('min_price') is not None:
            if v < values['min_price']:
                raise ValueError('最高价格不能低于最低价格')
        return v

    def matches(self, course: Course) -> bool:
        """判断课程是否满足全部过滤条件"""
        if self.category_id is not None and course.category_id != self.category_id:
            return False

        if self.search:
            keyword = self.search.lower()
            in_title = keyword in course.title.lower()
            in_description = keyword in (course.description or "").lower()
            if not (in_title or in_description):
                return False

        price = course.effective_price
        if self.min_price is not None and price < self.min_price:
            return False
        if self.max_price is not None and price > self.max_price:
            return False

        if self.level is not None and course.level != self.level:
            return False

        return True
