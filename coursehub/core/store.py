"""
内存实体存储
每种实体一个按ID索引的集合，各自维护单调递增的ID计数器
"""

import threading
from typing import Dict, Generic, Iterator, List, Optional, TypeVar

import structlog

logger = structlog.get_logger()

T = TypeVar("T")


class EntityCollection(Generic[T]):
    """单一实体类型的内存集合"""

    def __init__(self, name: str):
        self.name = name
        self._items: Dict[int, T] = {}
        self._next_id = 1

    def next_id(self) -> int:
        """分配新的实体ID，ID永不复用"""
        entity_id = self._next_id
        self._next_id += 1
        return entity_id

    def get(self, entity_id: int) -> Optional[T]:
        return self._items.get(entity_id)

    def put(self, entity_id: int, entity: T) -> None:
        self._items[entity_id] = entity

    def __contains__(self, entity_id: int) -> bool:
        return entity_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        # dict保持插入顺序
        return iter(list(self._items.values()))

    def values(self) -> List[T]:
        return list(self._items.values())


class MemoryStore:
    """内存存储 - 持有全部实体集合与进程级锁"""

    def __init__(self):
        self.users: EntityCollection = EntityCollection("users")
        self.categories: EntityCollection = EntityCollection("categories")
        self.courses: EntityCollection = EntityCollection("courses")
        self.lessons: EntityCollection = EntityCollection("lessons")
        self.enrollments: EntityCollection = EntityCollection("enrollments")
        self.payments: EntityCollection = EntityCollection("payments")
        self.reviews: EntityCollection = EntityCollection("reviews")

        # 多步读改写序列（创建后计数、检查后创建等）都在此锁内执行
        self.lock = threading.RLock()

        logger.info("内存存储初始化完成")

    def collections(self) -> List[EntityCollection]:
        return [
            self.users,
            self.categories,
            self.courses,
            self.lessons,
            self.enrollments,
            self.payments,
            self.reviews,
        ]

    def stats(self) -> Dict[str, int]:
        """各集合实体数量"""
        return {collection.name: len(collection) for collection in self.collections()}
