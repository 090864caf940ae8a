from typing import List, Literal, Optional
import re

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_admin, get_current_user
from app.crud.student import student as crud_student
from app.schemas.common import ApiResponse, PaginationOptions
from app.schemas.student import Student, StudentCreate, StudentFilterRequest, StudentUpdate

router = APIRouter()


def _to_snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def get_student_filters(
        search_term: Optional[str] = Query(None, alias="searchTerm"),
        student_id: Optional[str] = Query(None, alias="studentId"),
        email: Optional[str] = Query(None),
        contact_no: Optional[str] = Query(None, alias="contactNo"),
        gender: Optional[str] = Query(None),
        blood_group: Optional[str] = Query(None, alias="bloodGroup"),
        academic_faculty_id: Optional[str] = Query(None, alias="academicFacultyId"),
        academic_department_id: Optional[str] = Query(None, alias="academicDepartmentId"),
        academic_semester_id: Optional[str] = Query(None, alias="academicSemesterId"),
) -> StudentFilterRequest:
    return StudentFilterRequest(
        search_term=search_term,
        student_id=student_id,
        email=email,
        contact_no=contact_no,
        gender=gender,
        blood_group=blood_group,
        academic_faculty_id=academic_faculty_id,
        academic_department_id=academic_department_id,
        academic_semester_id=academic_semester_id,
    )


def get_pagination_options(
        page: Optional[int] = Query(None, ge=1),
        limit: Optional[int] = Query(None, ge=1),
        sort_by: Optional[str] = Query(None, alias="sortBy"),
        sort_order: Optional[Literal["asc", "desc"]] = Query(None, alias="sortOrder"),
) -> PaginationOptions:
    return PaginationOptions(
        page=page,
        limit=limit,
        sort_by=_to_snake_case(sort_by) if sort_by else None,
        sort_order=sort_order,
    )


@router.post("/", response_model=ApiResponse[Student], status_code=status.HTTP_201_CREATED)
def create_student(
        student_in: StudentCreate,
        db: Session = Depends(get_db),
        current_admin: dict = Depends(get_current_admin)
):
    """
    创建学生
    """
    result = crud_student.insert_into_db(db, obj_in=student_in)
    return ApiResponse[Student](message="Student created successfully", data=result)


@router.get("/", response_model=ApiResponse[List[Student]])
def read_students(
        filters: StudentFilterRequest = Depends(get_student_filters),
        options: PaginationOptions = Depends(get_pagination_options),
        db: Session = Depends(get_db),
        current_user: dict = Depends(get_current_user)
):
    """
    获取学生列表，支持模糊搜索、精确筛选、排序和分页

    limit 超过 MAX_PAGE_LIMIT 时按上限处理，meta.limit 返回实际使用的条数
    """
    result = crud_student.get_all_from_db(db, filters=filters, options=options)
    return ApiResponse[List[Student]](
        message="Students fetched successfully", meta=result.meta, data=result.data
    )


@router.get("/{id}", response_model=ApiResponse[Student])
def read_student(
        id: str,
        db: Session = Depends(get_db),
        current_user: dict = Depends(get_current_user)
):
    """
    获取学生详情
    """
    result = crud_student.get_by_id_from_db(db, id=id)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="学生不存在"
        )
    return ApiResponse[Student](message="Student fetched successfully", data=result)


@router.patch("/{id}", response_model=ApiResponse[Student])
def update_student(
        id: str,
        student_in: StudentUpdate,
        db: Session = Depends(get_db),
        current_admin: dict = Depends(get_current_admin)
):
    """
    更新学生信息，只修改传入的字段
    """
    result = crud_student.update_into_db(db, id=id, obj_in=student_in)
    return ApiResponse[Student](message="Student updated successfully", data=result)


@router.delete("/{id}", response_model=ApiResponse[Student])
def delete_student(
        id: str,
        db: Session = Depends(get_db),
        current_admin: dict = Depends(get_current_admin)
):
    """
    删除学生，返回被删除的记录
    """
    result = crud_student.delete_from_db(db, id=id)
    return ApiResponse[Student](message="Student deleted successfully", data=result)
