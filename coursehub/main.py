"""
应用装配入口
创建内存存储并组装全部业务服务，供请求处理层调用
"""

import asyncio
import logging
from typing import Optional

from coursehub.core.config import Settings, settings as default_settings
from coursehub.core.logging import setup_logging
from coursehub.core.store import MemoryStore
from coursehub.scripts.seed_demo_data import seed_demo_data
from coursehub.services.aggregation_service import AggregationService
from coursehub.services.catalog_service import CatalogService
from coursehub.services.enrollment_service import EnrollmentService
from coursehub.services.payment_service import PaymentService
from coursehub.services.review_service import ReviewService
from coursehub.services.user_service import UserService

logger = logging.getLogger(__name__)


class Marketplace:
    """课程市场数据服务 - 共享同一个存储的服务集合"""

    def __init__(self, settings: Optional[Settings] = None, store: Optional[MemoryStore] = None):
        self.settings = settings or default_settings
        self.store = store or MemoryStore()

        self.aggregation_service = AggregationService(self.store)
        self.user_service = UserService(self.store)
        self.catalog_service = CatalogService(self.store)
        self.enrollment_service = EnrollmentService(self.store, self.aggregation_service)
        self.review_service = ReviewService(self.store, self.aggregation_service)
        self.payment_service = PaymentService(
            self.store,
            enrollment_service=self.enrollment_service,
            default_currency=self.settings.default_currency
        )


async def create_marketplace(settings: Optional[Settings] = None) -> Marketplace:
    """初始化日志并创建服务集合，按配置写入演示数据"""
    settings = settings or default_settings
    setup_logging(settings)

    logger.info(f"正在启动{settings.app_name} v{settings.app_version} ({settings.environment.value})")
    marketplace = Marketplace(settings=settings)

    if settings.seed_demo_data:
        await seed_demo_data(marketplace.user_service, marketplace.catalog_service)

    logger.info(f"应用启动完成: {marketplace.store.stats()}")
    return marketplace


async def main():
    marketplace = await create_marketplace()
    for course in await marketplace.catalog_service.list_featured_courses():
        logger.info(f"推荐课程: {course.title} ({course.effective_price} {marketplace.settings.default_currency})")


if __name__ == "__main__":
    asyncio.run(main())
