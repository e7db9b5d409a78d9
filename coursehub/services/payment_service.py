"""
支付业务服务层
结算时创建待支付记录；支付网关回调支付结果，支付成功后自动选课
"""

import logging
from typing import List, Optional, Union

from coursehub.core.exceptions import (
    BusinessException,
    ConflictError,
    InvalidInputError,
    NotFoundError,
    require_user_id
)
from coursehub.core.store import MemoryStore
from coursehub.models.payment import Payment, PaymentCreate, PaymentStatus
from coursehub.repositories.course_repository import CourseRepository
from coursehub.repositories.enrollment_repository import EnrollmentRepository
from coursehub.repositories.payment_repository import PaymentRepository
from coursehub.repositories.user_repository import UserRepository
from coursehub.services.enrollment_service import EnrollmentService

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = (PaymentStatus.COMPLETED, PaymentStatus.FAILED)


class PaymentService:
    """支付业务服务"""

    def __init__(
        self,
        store: MemoryStore,
        enrollment_service: Optional[EnrollmentService] = None,
        default_currency: str = "usd"
    ):
        self.store = store
        self.payment_repo = PaymentRepository(store)
        self.course_repo = CourseRepository(store)
        self.enrollment_repo = EnrollmentRepository(store)
        self.user_repo = UserRepository(store)
        self.enrollment_service = enrollment_service or EnrollmentService(store)
        self.default_currency = default_currency

    async def create_payment(
        self,
        user_id: Optional[int],
        course_id: int,
        payment_reference: str,
        currency: Optional[str] = None
    ) -> Payment:
        """结算：按课程实际售价创建待支付记录"""
        user_id = require_user_id(user_id)

        try:
            with self.store.lock:
                course = self.course_repo.get_or_raise(course_id)
                self.user_repo.get_or_raise(user_id)
                if self.enrollment_repo.find(user_id, course_id) is not None:
                    raise ConflictError(f"用户已选过该课程，无需重复支付: course_id={course_id}")

                payment = self.payment_repo.create(PaymentCreate(
                    user_id=user_id,
                    course_id=course_id,
                    amount=course.effective_price,
                    currency=currency or self.default_currency,
                    payment_reference=payment_reference
                ))
        except BusinessException as e:
            logger.warning(f"创建支付记录失败 user_id={user_id}, course_id={course_id}: {e}")
            raise

        logger.info(
            f"支付记录已创建: payment_id={payment.id}, reference={payment_reference}, "
            f"amount={payment.amount} {payment.currency}"
        )
        return payment

    async def notify_payment_outcome(
        self,
        payment_reference: str,
        status: Union[PaymentStatus, str]
    ) -> Payment:
        """处理支付网关的结果通知

        待支付记录只会迁移一次到终态；同一终态的重复通知是幂等的，
        不同终态的后续通知视为冲突。支付成功时为用户选课。
        """
        status = self._parse_terminal_status(status)

        try:
            with self.store.lock:
                payment = self.payment_repo.get_by_reference(payment_reference)
                if payment is None:
                    raise NotFoundError(f"支付记录不存在: {payment_reference}")

                if payment.is_pending():
                    payment = self.payment_repo.update_status_by_reference(payment_reference, status)
                    logger.info(f"支付状态更新: reference={payment_reference}, status={status.value}")
                elif payment.status != status:
                    raise ConflictError(
                        f"支付已处于终态{payment.status.value}，不能变更为{status.value}: {payment_reference}"
                    )
                else:
                    logger.info(f"重复的支付结果通知: reference={payment_reference}, status={status.value}")
        except BusinessException as e:
            logger.warning(f"处理支付结果失败 reference={payment_reference}: {e}")
            raise

        if payment.is_paid():
            await self._enroll_after_payment(payment)

        return payment

    async def get_payment(self, payment_id: int) -> Optional[Payment]:
        return self.payment_repo.get(payment_id)

    async def get_payment_by_reference(self, payment_reference: str) -> Optional[Payment]:
        return self.payment_repo.get_by_reference(payment_reference)

    async def list_user_payments(self, user_id: int) -> List[Payment]:
        """获取用户的支付历史"""
        return self.payment_repo.list_by_user(user_id)

    async def _enroll_after_payment(self, payment: Payment) -> None:
        try:
            await self.enrollment_service.enroll(payment.user_id, payment.course_id)
        except ConflictError:
            logger.info(
                f"支付对应的选课记录已存在: reference={payment.payment_reference}, "
                f"user_id={payment.user_id}, course_id={payment.course_id}"
            )

    def _parse_terminal_status(self, status: Union[PaymentStatus, str]) -> PaymentStatus:
        try:
            parsed = PaymentStatus(status)
        except ValueError:
            raise InvalidInputError(f"未知的支付状态: {status}")

        if parsed not in TERMINAL_STATUSES:
            raise InvalidInputError(f"支付结果只能是completed或failed: {parsed.value}")
        return parsed
