"""
服务包初始化文件
"""

from .aggregation_service import AggregationService, calculate_progress
from .catalog_service import CatalogService
from .enrollment_service import EnrollmentService
from .payment_service import PaymentService
from .review_service import ReviewService
from .user_service import UserService

__all__ = [
    "AggregationService",
    "calculate_progress",
    "CatalogService",
    "EnrollmentService",
    "PaymentService",
    "ReviewService",
    "UserService"
]
