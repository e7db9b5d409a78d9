"""
支付记录数据访问层
"""

from typing import Any, Dict, List, Optional

from coursehub.core.exceptions import NotFoundError
from coursehub.models.payment import Payment, PaymentCreate, PaymentStatus, PaymentUpdate
from coursehub.repositories.base import BaseRepository


class PaymentRepository(BaseRepository[Payment]):
    """支付记录数据访问层"""

    model = Payment
    create_model = PaymentCreate
    update_model = PaymentUpdate
    collection_name = "payments"
    entity_label = "支付记录"

    def get_by_reference(self, payment_reference: str) -> Optional[Payment]:
        """根据外部支付凭证获取支付记录"""
        return self.find_one(lambda payment: payment.payment_reference == payment_reference)

    def list_by_user(self, user_id: int) -> List[Payment]:
        """获取用户的支付记录"""
        return self.filter(lambda payment: payment.user_id == user_id)

    def update_status_by_reference(self, payment_reference: str, status: PaymentStatus) -> Payment:
        """根据外部支付凭证更新支付状态"""
        with self.store.lock:
            payment = self.get_by_reference(payment_reference)
            if payment is None:
                raise NotFoundError(f"支付记录不存在: {payment_reference}")
            return self.update(payment.id, {"status": status})

    def _before_create(self, fields: Dict[str, Any]) -> None:
        self._ensure_unique("payment_reference", fields["payment_reference"], label="支付凭证")
