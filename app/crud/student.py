from enum import Enum
from typing import List, Optional
import logging

from sqlalchemy import and_, func, or_
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.sql.elements import ColumnElement

from app.core.exceptions import NotFound
from app.models.student import Student
from app import schemas
from app.schemas.common import GenericResponse, PaginationMeta, PaginationOptions
from app.schemas.student import StudentCreate, StudentFilterRequest, StudentUpdate
from app.utils.pagination import DEFAULT_SORT_BY, calculate_pagination
from .base import CRUDBase, db_errors

logger = logging.getLogger(__name__)

# 模糊搜索覆盖的字段
STUDENT_SEARCHABLE_FIELDS = [
    "first_name",
    "last_name",
    "middle_name",
    "email",
    "contact_no",
    "student_id",
]


class StudentFilterField(Enum):
    """
    学生列表可精确筛选的字段

    每个成员的值为 (筛选键, 关联名)。关联名为 None 时直接比较学生表的同名列，
    否则按关联对象的 id 匹配。
    """
    STUDENT_ID = ("student_id", None)
    EMAIL = ("email", None)
    CONTACT_NO = ("contact_no", None)
    GENDER = ("gender", None)
    BLOOD_GROUP = ("blood_group", None)
    ACADEMIC_FACULTY_ID = ("academic_faculty_id", "academic_faculty")
    ACADEMIC_DEPARTMENT_ID = ("academic_department_id", "academic_department")
    ACADEMIC_SEMESTER_ID = ("academic_semester_id", "academic_semester")

    def __init__(self, key: str, relation: Optional[str]):
        self.key = key
        self.relation = relation

    @property
    def is_relational(self) -> bool:
        return self.relation is not None

    def condition(self, value) -> ColumnElement:
        if self.is_relational:
            return getattr(Student, self.relation).has(id=value)
        return getattr(Student, self.key) == value


STUDENT_RELATIONS = (
    Student.academic_faculty,
    Student.academic_department,
    Student.academic_semester,
)


def _with_relations(query):
    return query.options(*(joinedload(relation) for relation in STUDENT_RELATIONS))


def build_where_conditions(filters: Optional[StudentFilterRequest]) -> List[ColumnElement]:
    """
    把筛选条件转换为需要 AND 组合的条件列表，列表为空表示不过滤

    - search_term 非空时，生成跨 STUDENT_SEARCHABLE_FIELDS 的不区分大小写包含匹配（OR）
    - 其余已提供的筛选字段逐个生成精确匹配，关联字段匹配关联对象的 id
    """
    if filters is None:
        return []

    conditions = []
    if filters.search_term:
        # autoescape 使 % 和 _ 按普通字符匹配
        conditions.append(
            or_(*(
                getattr(Student, field).icontains(filters.search_term, autoescape=True)
                for field in STUDENT_SEARCHABLE_FIELDS
            ))
        )

    filter_data = filters.model_dump(exclude={"search_term"}, exclude_none=True)
    for field in StudentFilterField:
        if field.key in filter_data:
            conditions.append(field.condition(filter_data[field.key]))

    return conditions


def build_order_by(sort_by: str, sort_order: str) -> list:
    column = Student.__table__.columns.get(sort_by)
    if column is None:
        logger.debug(f"未知的排序字段 {sort_by}，改用 {DEFAULT_SORT_BY}")
        column = Student.__table__.columns[DEFAULT_SORT_BY]
    order = column.asc() if sort_order == "asc" else column.desc()
    # id 作为次级排序，保证分页稳定
    return [order, Student.id.asc()]


class CRUDStudent(CRUDBase[Student, StudentCreate, StudentUpdate]):
    """
    学生的增删改查

    对外返回 schemas.Student 快照，其中已包含学期、系、学院，
    会话提交或关闭后仍可安全使用。
    """

    def _get_with_relations(self, db: Session, id: str) -> Optional[Student]:
        with db_errors(db):
            return _with_relations(db.query(Student)).filter(Student.id == id).first()

    def insert_into_db(self, db: Session, *, obj_in: StudentCreate) -> schemas.Student:
        db_obj = self.create(db, obj_in=obj_in)
        return schemas.Student.model_validate(self._get_with_relations(db, db_obj.id))

    def get_all_from_db(
        self,
        db: Session,
        *,
        filters: Optional[StudentFilterRequest] = None,
        options: Optional[PaginationOptions] = None,
    ) -> GenericResponse[List[schemas.Student]]:
        """
        按筛选条件分页查询学生

        当前页数据和总数是两次独立查询，并发写入时两者可能不完全一致。
        """
        pagination = calculate_pagination(options)
        conditions = build_where_conditions(filters)
        logger.debug(
            f"查询学生: {len(conditions)} 个条件, skip={pagination.skip}, limit={pagination.limit}"
        )

        with db_errors(db):
            query = _with_relations(db.query(Student))
            count_query = db.query(func.count(Student.id))
            if conditions:
                where = and_(*conditions)
                query = query.filter(where)
                count_query = count_query.filter(where)

            result = (
                query.order_by(*build_order_by(pagination.sort_by, pagination.sort_order))
                .offset(pagination.skip)
                .limit(pagination.limit)
                .all()
            )
            total = count_query.scalar()

        return GenericResponse[List[schemas.Student]](
            meta=PaginationMeta(total=total, page=pagination.page, limit=pagination.limit),
            data=[schemas.Student.model_validate(row) for row in result],
        )

    def get_by_id_from_db(self, db: Session, *, id: str) -> Optional[schemas.Student]:
        """不存在时返回 None"""
        db_obj = self._get_with_relations(db, id)
        if db_obj is None:
            return None
        return schemas.Student.model_validate(db_obj)

    def update_into_db(self, db: Session, *, id: str, obj_in: StudentUpdate) -> schemas.Student:
        db_obj = self._get_with_relations(db, id)
        if db_obj is None:
            raise NotFound(f"学生 {id} 不存在")
        self.update(db, db_obj=db_obj, obj_in=obj_in)
        return schemas.Student.model_validate(self._get_with_relations(db, id))

    def delete_from_db(self, db: Session, *, id: str) -> schemas.Student:
        """删除学生，返回删除前的记录（含关联对象）"""
        db_obj = self._get_with_relations(db, id)
        if db_obj is None:
            raise NotFound(f"学生 {id} 不存在")
        snapshot = schemas.Student.model_validate(db_obj)
        with db_errors(db):
            db.delete(db_obj)
            db.commit()
        logger.info(f"删除学生: {id}")
        return snapshot


student = CRUDStudent(Student)
