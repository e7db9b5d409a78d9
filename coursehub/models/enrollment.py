"""
选课记录数据模型
"""

from datetime import datetime
from typing import Optional, Set
from pydantic import BaseModel, Field
from enum import Enum

from coursehub.models.course import Course


class EnrollmentStatus(str, Enum):
    """选课状态枚举"""
    ACTIVE = "active"  # 学习中
    COMPLETED = "completed"  # 已完成
    CANCELLED = "cancelled"  # 已取消（预留，当前没有操作会进入该状态）


class Enrollment(BaseModel):
    """选课记录模型 - 每个(用户, 课程)最多一条"""

    id: int = Field(..., ge=1, description="选课记录ID")
    user_id: int = Field(..., ge=1, description="用户ID")
    course_id: int = Field(..., ge=1, description="课程ID")
    status: EnrollmentStatus = Field(default=EnrollmentStatus.ACTIVE, description="选课状态")
    progress: int = Field(default=0, ge=0, le=100, description="学习进度百分比")
    completed_lessons: Set[int] = Field(default_factory=set, description="已完成课时ID集合")
    completed_at: Optional[datetime] = Field(None, description="完成时间")
    created_at: datetime = Field(default_factory=datetime.now)

    def is_completed(self) -> bool:
        """检查是否已完成"""
        return self.status == EnrollmentStatus.COMPLETED


class EnrollmentWithCourse(Enrollment):
    """选课记录与课程的联表结果"""

    course: Course

    @classmethod
    def from_enrollment(cls, enrollment: Enrollment, course: Course) -> "EnrollmentWithCourse":
        """从Enrollment模型创建联表对象"""
        return cls(
            id=enrollment.id,
            user_id=enrollment.user_id,
            course_id=enrollment.course_id,
            status=enrollment.status,
            progress=enrollment.progress,
            completed_lessons=set(enrollment.completed_lessons),
            completed_at=enrollment.completed_at,
            created_at=enrollment.created_at,
            course=course
        )


class EnrollmentCreate(BaseModel):
    """创建选课记录模型 - 新记录状态为学习中、进度为0"""

    user_id: int = Field(..., ge=1)
    course_id: int = Field(..., ge=1)


class EnrollmentUpdate(BaseModel):
    """更新选课进度模型，仅供选课生命周期与聚合逻辑使用"""

    status: Optional[EnrollmentStatus] = None
    progress: Optional[int] = Field(None, ge=0, le=100)
    completed_lessons: Optional[Set[int]] = None
    completed_at: Optional[datetime] = None
