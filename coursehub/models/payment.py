"""
支付相关数据模型
"""

from decimal import Decimal
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, validator
from enum import Enum


class PaymentStatus(str, Enum):
    """支付状态枚举"""
    PENDING = "pending"  # 待支付
    COMPLETED = "completed"  # 已支付
    FAILED = "failed"  # 支付失败


class Payment(BaseModel):
    """支付记录模型"""

    id: int = Field(..., ge=1, description="支付记录ID")
    user_id: int = Field(..., ge=1, description="用户ID")
    course_id: int = Field(..., ge=1, description="课程ID")
    amount: Decimal = Field(..., ge=0, description="支付金额")
    currency: str = Field(default="usd", min_length=3, max_length=3, description="币种")
    status: PaymentStatus = Field(default=PaymentStatus.PENDING, description="支付状态")
    payment_reference: str = Field(..., min_length=1, description="支付网关的外部支付凭证")
    created_at: datetime = Field(default_factory=datetime.now)

    def is_pending(self) -> bool:
        """检查是否待支付"""
        return self.status == PaymentStatus.PENDING

    def is_paid(self) -> bool:
        """检查是否已支付"""
        return self.status == PaymentStatus.COMPLETED


class PaymentCreate(BaseModel):
    """创建支付记录模型 - 新记录总是处于待支付状态"""

    user_id: int = Field(..., ge=1)
    course_id: int = Field(..., ge=1)
    amount: Decimal = Field(..., ge=0)
    currency: str = Field(default="usd", min_length=3, max_length=3)
    payment_reference: str = Field(..., min_length=1)

    @validator('currency')
    def normalize_currency(cls, v):
        """币种统一小写"""
        return v.lower()


class PaymentUpdate(BaseModel):
    """更新支付状态模型"""

    status: Optional[PaymentStatus] = None
