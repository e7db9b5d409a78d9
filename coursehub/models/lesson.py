"""
课时数据模型
"""

from typing import Optional
from pydantic import BaseModel, Field


class Lesson(BaseModel):
    """课时模型"""

    id: int = Field(..., ge=1, description="课时唯一标识")
    title: str = Field(..., min_length=1, max_length=200, description="课时标题")
    description: Optional[str] = Field(None, max_length=2000, description="课时描述")
    content: Optional[str] = Field(None, description="课时内容")
    course_id: int = Field(..., ge=1, description="所属课程ID")
    duration: int = Field(default=0, ge=0, description="时长(分钟)")
    order: int = Field(default=0, description="课程内排序位置")


class LessonCreate(BaseModel):
    """创建课时数据模型"""

    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    content: Optional[str] = None
    course_id: int = Field(..., ge=1)
    duration: int = Field(default=0, ge=0)
    order: int = 0


class LessonUpdate(BaseModel):
    """更新课时数据模型 - 所属课程不可变更"""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    content: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0)
    order: Optional[int] = None
