import uuid
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class AcademicFaculty(Base):
    """学院"""
    __tablename__ = "academic_faculties"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    title = Column(String(100), unique=True, nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    # 关系
    academic_departments = relationship("AcademicDepartment", back_populates="academic_faculty")
    students = relationship("Student", back_populates="academic_faculty")


class AcademicDepartment(Base):
    """系"""
    __tablename__ = "academic_departments"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    title = Column(String(100), unique=True, nullable=False)
    academic_faculty_id = Column(String(36), ForeignKey("academic_faculties.id"), nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    # 关系
    academic_faculty = relationship("AcademicFaculty", back_populates="academic_departments")
    students = relationship("Student", back_populates="academic_department")


class AcademicSemester(Base):
    """学期"""
    __tablename__ = "academic_semesters"
    __table_args__ = (UniqueConstraint("year", "title", name="uq_academic_semester_year_title"),)

    id = Column(String(36), primary_key=True, default=generate_uuid)
    year = Column(Integer, nullable=False)
    title = Column(String(50), nullable=False)
    code = Column(String(10), nullable=False)
    start_month = Column(String(20), nullable=False)
    end_month = Column(String(20), nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    # 关系
    students = relationship("Student", back_populates="academic_semester")
