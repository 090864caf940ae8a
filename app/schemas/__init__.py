# 导入常用模型，方便其他模块引用
from .admin import AdminCreate, AdminLogin, Token
from .academic import (
    AcademicFaculty, AcademicFacultyCreate,
    AcademicDepartment, AcademicDepartmentCreate,
    AcademicSemester, AcademicSemesterCreate,
)
from .common import PaginationOptions, PaginationMeta, GenericResponse, ApiResponse
from .student import Student, StudentCreate, StudentUpdate, StudentFilterRequest
