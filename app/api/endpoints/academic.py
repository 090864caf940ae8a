from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_admin, get_current_user
from app.crud.academic import academic_faculty, academic_department, academic_semester
from app.schemas.academic import (
    AcademicFaculty, AcademicFacultyCreate,
    AcademicDepartment, AcademicDepartmentCreate,
    AcademicSemester, AcademicSemesterCreate,
)

faculty_router = APIRouter()
department_router = APIRouter()
semester_router = APIRouter()


@faculty_router.post("/", response_model=AcademicFaculty, status_code=status.HTTP_201_CREATED)
def create_academic_faculty(
        faculty_in: AcademicFacultyCreate,
        db: Session = Depends(get_db),
        current_admin: dict = Depends(get_current_admin)
):
    return academic_faculty.create(db, obj_in=faculty_in)


@faculty_router.get("/", response_model=List[AcademicFaculty])
def read_academic_faculties(
        skip: int = 0,
        limit: int = 100,
        db: Session = Depends(get_db),
        current_user: dict = Depends(get_current_user)
):
    return academic_faculty.get_multi(db, skip=skip, limit=limit)


@faculty_router.get("/{id}", response_model=AcademicFaculty)
def read_academic_faculty(
        id: str,
        db: Session = Depends(get_db),
        current_user: dict = Depends(get_current_user)
):
    faculty = academic_faculty.get(db, id=id)
    if not faculty:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="学院不存在")
    return faculty


@department_router.post("/", response_model=AcademicDepartment, status_code=status.HTTP_201_CREATED)
def create_academic_department(
        department_in: AcademicDepartmentCreate,
        db: Session = Depends(get_db),
        current_admin: dict = Depends(get_current_admin)
):
    return academic_department.create(db, obj_in=department_in)


@department_router.get("/", response_model=List[AcademicDepartment])
def read_academic_departments(
        academic_faculty_id: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
        db: Session = Depends(get_db),
        current_user: dict = Depends(get_current_user)
):
    """
    获取系列表，可按学院过滤
    """
    if academic_faculty_id is not None:
        return academic_department.get_by_faculty(
            db, academic_faculty_id=academic_faculty_id, skip=skip, limit=limit
        )
    return academic_department.get_multi(db, skip=skip, limit=limit)


@department_router.get("/{id}", response_model=AcademicDepartment)
def read_academic_department(
        id: str,
        db: Session = Depends(get_db),
        current_user: dict = Depends(get_current_user)
):
    department = academic_department.get(db, id=id)
    if not department:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="系不存在")
    return department


@semester_router.post("/", response_model=AcademicSemester, status_code=status.HTTP_201_CREATED)
def create_academic_semester(
        semester_in: AcademicSemesterCreate,
        db: Session = Depends(get_db),
        current_admin: dict = Depends(get_current_admin)
):
    return academic_semester.create(db, obj_in=semester_in)


@semester_router.get("/", response_model=List[AcademicSemester])
def read_academic_semesters(
        skip: int = 0,
        limit: int = 100,
        db: Session = Depends(get_db),
        current_user: dict = Depends(get_current_user)
):
    return academic_semester.get_multi(db, skip=skip, limit=limit)


@semester_router.get("/{id}", response_model=AcademicSemester)
def read_academic_semester(
        id: str,
        db: Session = Depends(get_db),
        current_user: dict = Depends(get_current_user)
):
    semester = academic_semester.get(db, id=id)
    if not semester:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="学期不存在")
    return semester


@department_router.delete("/{id}", response_model=AcademicDepartment)
def delete_academic_department(
        id: str,
        db: Session = Depends(get_db),
        current_admin: dict = Depends(get_current_admin)
):
    """
    删除系，仍有学生关联时返回 409
    """
    return academic_department.remove(db, id=id)
