from typing import List
from sqlalchemy.orm import Session

from app.models.academic import AcademicFaculty, AcademicDepartment, AcademicSemester
from app.schemas.academic import (
    AcademicFacultyCreate, AcademicDepartmentCreate, AcademicSemesterCreate
)
from .base import CRUDBase, db_errors


class CRUDAcademicFaculty(CRUDBase[AcademicFaculty, AcademicFacultyCreate, AcademicFacultyCreate]):
    pass


class CRUDAcademicDepartment(CRUDBase[AcademicDepartment, AcademicDepartmentCreate, AcademicDepartmentCreate]):
    def get_by_faculty(
        self, db: Session, *, academic_faculty_id: str, skip: int = 0, limit: int = 100
    ) -> List[AcademicDepartment]:
        with db_errors(db):
            return db.query(AcademicDepartment).filter(
                AcademicDepartment.academic_faculty_id == academic_faculty_id
            ).offset(skip).limit(limit).all()


class CRUDAcademicSemester(CRUDBase[AcademicSemester, AcademicSemesterCreate, AcademicSemesterCreate]):
    pass


academic_faculty = CRUDAcademicFaculty(AcademicFaculty)
academic_department = CRUDAcademicDepartment(AcademicDepartment)
academic_semester = CRUDAcademicSemester(AcademicSemester)
