from sqlalchemy import Column, ForeignKey, String, DateTime
from sqlalchemy.orm import relationship
import datetime

from app.db.base import Base
from app.models.academic import generate_uuid


class Student(Base):
    """学生表"""
    __tablename__ = "students"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    student_id = Column(String(50), unique=True, index=True, nullable=False)
    first_name = Column(String(100), nullable=False)
    middle_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=False)
    profile_image = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    contact_no = Column(String(30), nullable=False)
    gender = Column(String(20), nullable=False)
    blood_group = Column(String(5), nullable=False)
    created_at = Column(DateTime, default=datetime.datetime.now, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.datetime.now, onupdate=datetime.datetime.now, nullable=False)

    academic_semester_id = Column(String(36), ForeignKey("academic_semesters.id"), nullable=False)
    academic_department_id = Column(String(36), ForeignKey("academic_departments.id"), nullable=False)
    academic_faculty_id = Column(String(36), ForeignKey("academic_faculties.id"), nullable=False)

    # 关联的学期、系、学院
    academic_semester = relationship("AcademicSemester", back_populates="students")
    academic_department = relationship("AcademicDepartment", back_populates="students")
    academic_faculty = relationship("AcademicFaculty", back_populates="students")
