from fastapi import APIRouter

from app.api.endpoints import auth, students, academic

api_router = APIRouter()

# 认证路由
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])

# 学生路由
api_router.include_router(students.router, prefix="/students", tags=["students"])

# 学院、系、学期路由
api_router.include_router(academic.faculty_router, prefix="/academic-faculties", tags=["academic-faculties"])
api_router.include_router(academic.department_router, prefix="/academic-departments", tags=["academic-departments"])
api_router.include_router(academic.semester_router, prefix="/academic-semesters", tags=["academic-semesters"])
