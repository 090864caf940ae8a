# 导入全部模型，确保 Base.metadata 中注册了所有表
from .academic import AcademicFaculty, AcademicDepartment, AcademicSemester
from .admin import Administrator
from .student import Student
