from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Optional, Type, TypeVar, Union
import logging

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.orm import Session

from app.core.exceptions import BackendUnavailable, ConstraintViolation, NotFound
from app.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


@contextmanager
def db_errors(db: Session) -> Iterator[None]:
    """回滚会话并把 SQLAlchemy 异常转换为服务层异常，不做重试"""
    try:
        yield
    except IntegrityError as exc:
        db.rollback()
        logger.warning(f"数据约束冲突: {exc.orig}")
        raise ConstraintViolation() from exc
    except (OperationalError, InterfaceError) as exc:
        db.rollback()
        logger.error(f"数据库访问失败: {exc}")
        raise BackendUnavailable() from exc


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        """
        通用的增删改查对象

        Args:
            model: SQLAlchemy 模型类
        """
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        with db_errors(db):
            return db.get(self.model, id)

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: int = 100
    ) -> List[ModelType]:
        with db_errors(db):
            return db.query(self.model).offset(skip).limit(limit).all()

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        db_obj = self.model(**obj_in.model_dump())
        with db_errors(db):
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        logger.info(f"创建 {self.model.__name__}: {db_obj.id}")
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        with db_errors(db):
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        logger.info(f"更新 {self.model.__name__}: {db_obj.id}")
        return db_obj

    def remove(self, db: Session, *, id: Any) -> ModelType:
        with db_errors(db):
            obj = db.get(self.model, id)
            if obj is None:
                raise NotFound(f"{self.model.__name__} {id} 不存在")
            db.delete(obj)
            db.commit()
        logger.info(f"删除 {self.model.__name__}: {id}")
        return obj
