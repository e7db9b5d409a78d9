"""
课程分类数据模型
"""

from typing import Optional
from pydantic import BaseModel, Field

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class Category(BaseModel):
    """课程分类模型"""

    id: int = Field(..., ge=1, description="分类唯一标识")
    name: str = Field(..., min_length=1, max_length=100, description="分类名称")
    slug: str = Field(..., pattern=SLUG_PATTERN, description="分类slug")
    description: Optional[str] = Field(None, max_length=2000, description="分类描述")
    icon: Optional[str] = Field(None, description="图标引用")
    # 派生字段：引用该分类的课程创建次数，只增不减
    course_count: int = Field(default=0, ge=0, description="课程数量")


class CategoryCreate(BaseModel):
    """创建分类数据模型"""

    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., pattern=SLUG_PATTERN)
    description: Optional[str] = Field(None, max_length=2000)
    icon: Optional[str] = None


class CategoryUpdate(BaseModel):
    """更新分类数据模型"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, pattern=SLUG_PATTERN)
    description: Optional[str] = Field(None, max_length=2000)
    icon: Optional[str] = None
