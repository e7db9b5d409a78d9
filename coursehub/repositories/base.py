"""
内存仓库基类 - 提供通用的获取、创建、更新操作
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from coursehub.core.exceptions import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    invalid_input_from
)
from coursehub.core.store import EntityCollection, MemoryStore

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

Payload = Union[BaseModel, Dict[str, Any]]


class BaseRepository(Generic[ModelT]):
    """内存仓库基类

    子类声明实体模型、创建/更新载荷模型以及对应的集合名称，
    并通过 `_before_create` / `_after_create` / `_before_update` 钩子实现
    唯一性校验、引用校验和派生字段维护。钩子均在存储锁内执行。
    """

    model: Type[ModelT]
    create_model: Type[BaseModel]
    update_model: Optional[Type[BaseModel]] = None
    collection_name: str = ""
    entity_label: str = "实体"

    def __init__(self, store: MemoryStore):
        self.store = store

    @property
    def collection(self) -> EntityCollection:
        return getattr(self.store, self.collection_name)

    # ------------------------------------------------------------------
    # 读取
    # ------------------------------------------------------------------

    def get(self, entity_id: int) -> Optional[ModelT]:
        """根据ID获取实体，返回副本"""
        entity = self.collection.get(entity_id)
        if entity is None:
            return None
        return entity.model_copy(deep=True)

    def get_or_raise(self, entity_id: int) -> ModelT:
        """根据ID获取实体，不存在时抛出NotFoundError"""
        entity = self.get(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.entity_label}不存在: {entity_id}")
        return entity

    def exists(self, entity_id: int) -> bool:
        return entity_id in self.collection

    def list_all(self) -> List[ModelT]:
        """按插入顺序返回全部实体"""
        return [entity.model_copy(deep=True) for entity in self.collection]

    def filter(self, predicate: Callable[[ModelT], bool]) -> List[ModelT]:
        """按插入顺序返回满足条件的实体"""
        return [
            entity.model_copy(deep=True)
            for entity in self.collection
            if predicate(entity)
        ]

    def find_one(self, predicate: Callable[[ModelT], bool]) -> Optional[ModelT]:
        """返回第一个满足条件的实体"""
        for entity in self.collection:
            if predicate(entity):
                return entity.model_copy(deep=True)
        return None

    def count(self) -> int:
        return len(self.collection)

    # ------------------------------------------------------------------
    # 写入
    # ------------------------------------------------------------------

    def create(self, data: Payload) -> ModelT:
        """创建实体：分配ID、应用默认值并存储"""
        payload = self._validate_payload(self.create_model, data)
        fields = payload.model_dump(exclude_unset=False)

        with self.store.lock:
            self._before_create(fields)
            entity_id = self.collection.next_id()
            entity = self._build(entity_id, fields)
            self.collection.put(entity_id, entity)
            self._after_create(entity)

        logger.info(f"{self.entity_label}创建成功: id={entity_id}")
        return entity.model_copy(deep=True)

    def update(self, entity_id: int, data: Payload) -> ModelT:
        """合并部分字段更新实体"""
        if self.update_model is None:
            raise InvalidInputError(f"{self.entity_label}不支持更新")

        payload = self._validate_payload(self.update_model, data)
        changes = payload.model_dump(exclude_unset=True)

        with self.store.lock:
            current = self.collection.get(entity_id)
            if current is None:
                raise NotFoundError(f"{self.entity_label}不存在: {entity_id}")
            self._before_update(current, changes)
            entity = self._merge(current, changes)
            self.collection.put(entity_id, entity)

        logger.info(f"{self.entity_label}更新成功: id={entity_id}, 字段={sorted(changes)}")
        return entity.model_copy(deep=True)

    def _apply(self, entity_id: int, **changes: Any) -> ModelT:
        """内部写入派生字段，绕过更新载荷模型"""
        with self.store.lock:
            current = self.collection.get(entity_id)
            if current is None:
                raise NotFoundError(f"{self.entity_label}不存在: {entity_id}")
            entity = self._merge(current, changes)
            self.collection.put(entity_id, entity)
        return entity.model_copy(deep=True)

    # ------------------------------------------------------------------
    # 钩子与工具方法
    # ------------------------------------------------------------------

    def _build(self, entity_id: int, fields: Dict[str, Any]) -> ModelT:
        try:
            return self.model(id=entity_id, **fields)
        except ValidationError as e:
            raise invalid_input_from(e, f"{self.entity_label}字段校验失败")

    def _before_create(self, fields: Dict[str, Any]) -> None:
        pass

    def _after_create(self, entity: ModelT) -> None:
        pass

    def _before_update(self, current: ModelT, changes: Dict[str, Any]) -> None:
        pass

    def _merge(self, current: ModelT, changes: Dict[str, Any]) -> ModelT:
        data = {name: getattr(current, name) for name in type(current).model_fields}
        data.update(changes)
        try:
            return self.model.model_validate(data)
        except ValidationError as e:
            raise invalid_input_from(e, f"{self.entity_label}字段校验失败")

    def _validate_payload(self, payload_model: Type[BaseModel], data: Payload) -> BaseModel:
        if isinstance(data, payload_model):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)
        if not isinstance(data, dict):
            raise InvalidInputError(f"{self.entity_label}载荷类型不正确: {type(data).__name__}")
        try:
            return payload_model.model_validate(data)
        except ValidationError as e:
            raise invalid_input_from(e, f"{self.entity_label}字段校验失败")

    def _ensure_unique(
        self,
        field: str,
        value: Any,
        exclude_id: Optional[int] = None,
        label: Optional[str] = None
    ) -> None:
        """校验字段在集合内唯一，None值不参与校验"""
        if value is None:
            return
        for entity in self.collection:
            if entity.id == exclude_id:
                continue
            if getattr(entity, field) == value:
                raise ConflictError(f"{label or field}已存在: {value}")
