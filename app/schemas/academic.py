from pydantic import BaseModel
from datetime import datetime


class AcademicFacultyCreate(BaseModel):
    title: str


class AcademicFaculty(AcademicFacultyCreate):
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }


class AcademicDepartmentCreate(BaseModel):
    title: str
    academic_faculty_id: str


class AcademicDepartment(AcademicDepartmentCreate):
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }


class AcademicSemesterCreate(BaseModel):
    year: int
    title: str
    code: str
    start_month: str
    end_month: str


class AcademicSemester(AcademicSemesterCreate):
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }
