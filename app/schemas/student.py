from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from .academic import AcademicFaculty, AcademicDepartment, AcademicSemester


class StudentBase(BaseModel):
    student_id: str
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    profile_image: Optional[str] = None
    email: str
    contact_no: str
    gender: str
    blood_group: str
    academic_semester_id: str
    academic_department_id: str
    academic_faculty_id: str


class StudentCreate(StudentBase):
    pass


class StudentUpdate(BaseModel):
    """部分更新，只有显式传入的字段会被写入"""
    student_id: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image: Optional[str] = None
    email: Optional[str] = None
    contact_no: Optional[str] = None
    gender: Optional[str] = None
    blood_group: Optional[str] = None
    academic_semester_id: Optional[str] = None
    academic_department_id: Optional[str] = None
    academic_faculty_id: Optional[str] = None


class StudentInDBBase(StudentBase):
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }


class Student(StudentInDBBase):
    academic_faculty: Optional[AcademicFaculty] = None
    academic_department: Optional[AcademicDepartment] = None
    academic_semester: Optional[AcademicSemester] = None


class StudentFilterRequest(BaseModel):
    """学生列表筛选条件，search_term 为跨字段模糊搜索，其余字段为精确匹配"""
    search_term: Optional[str] = None
    student_id: Optional[str] = None
    email: Optional[str] = None
    contact_no: Optional[str] = None
    gender: Optional[str] = None
    blood_group: Optional[str] = None
    academic_faculty_id: Optional[str] = None
    academic_department_id: Optional[str] = None
    academic_semester_id: Optional[str] = None
