import os

# 测试使用内存 SQLite，必须在导入应用之前设置
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient

from app.crud.academic import academic_department, academic_faculty, academic_semester
from app.crud.admin import admin as crud_admin
from app.crud.student import student as crud_student
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.schemas.academic import (
    AcademicDepartmentCreate, AcademicFacultyCreate, AcademicSemesterCreate
)
from app.schemas.admin import AdminCreate
from app.schemas.student import StudentCreate
import app.models  # noqa: F401


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def academics(db):
    """一个学院、两个系、一个学期"""
    faculty = academic_faculty.create(db, obj_in=AcademicFacultyCreate(title="Faculty of Science"))
    cse = academic_department.create(
        db, obj_in=AcademicDepartmentCreate(title="CSE", academic_faculty_id=faculty.id)
    )
    eee = academic_department.create(
        db, obj_in=AcademicDepartmentCreate(title="EEE", academic_faculty_id=faculty.id)
    )
    semester = academic_semester.create(
        db,
        obj_in=AcademicSemesterCreate(
            year=2025, title="Autumn", code="01", start_month="January", end_month="May"
        ),
    )
    return {
        "faculty_id": faculty.id,
        "cse_id": cse.id,
        "eee_id": eee.id,
        "semester_id": semester.id,
    }


@pytest.fixture
def student_payload(academics):
    def _payload(index: int, department_id: str = None, **overrides) -> dict:
        data = {
            "student_id": f"S{index:04d}",
            "first_name": f"First{index}",
            "last_name": f"Last{index}",
            "email": f"student{index}@example.com",
            "contact_no": f"0170000{index:04d}",
            "gender": "male" if index % 2 else "female",
            "blood_group": "O+",
            "academic_semester_id": academics["semester_id"],
            "academic_department_id": department_id or academics["cse_id"],
            "academic_faculty_id": academics["faculty_id"],
        }
        data.update(overrides)
        return data

    return _payload


@pytest.fixture
def make_student(db, student_payload):
    def _make(index: int, **kwargs):
        return crud_student.insert_into_db(db, obj_in=StudentCreate(**student_payload(index, **kwargs)))

    return _make


@pytest.fixture
def client(db):
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(db, client):
    crud_admin.create(db, obj_in=AdminCreate(username="admin", password="secret-pass"))
    response = client.post(
        "/api/v1/auth/admin/login", json={"username": "admin", "password": "secret-pass"}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
