import datetime

import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import BackendUnavailable, ConstraintViolation, NotFound
from app.crud.student import student as crud_student
from app.models.student import Student as StudentDb
from app.schemas.common import PaginationOptions
from app.schemas.student import StudentCreate, StudentFilterRequest, StudentUpdate


def _set_created_at(db, student_id: str, created_at: datetime.datetime):
    db.query(StudentDb).filter(StudentDb.id == student_id).update({"created_at": created_at})
    db.commit()


def test_insert_attaches_relations(db, academics, make_student):
    created = make_student(1)

    assert created.id
    assert created.academic_faculty.id == academics["faculty_id"]
    assert created.academic_department.title == "CSE"
    assert created.academic_semester.title == "Autumn"


def test_insert_then_get_by_id(db, make_student):
    created = make_student(1, middle_name="Q")

    fetched = crud_student.get_by_id_from_db(db, id=created.id)

    assert fetched == created
    assert fetched.middle_name == "Q"


def test_get_by_id_missing_returns_none(db):
    assert crud_student.get_by_id_from_db(db, id="missing") is None


def test_insert_duplicate_email_is_constraint_violation(db, make_student):
    make_student(1)

    with pytest.raises(ConstraintViolation):
        make_student(2, email="student1@example.com")

    # 会话回滚后仍可继续使用
    assert crud_student.get_all_from_db(db).meta.total == 1


def test_insert_unknown_relation_is_constraint_violation(db, student_payload):
    payload = student_payload(1, academic_faculty_id="no-such-faculty")

    with pytest.raises(ConstraintViolation):
        crud_student.insert_into_db(db, obj_in=StudentCreate(**payload))


def test_get_all_without_filters_returns_everything(db, make_student):
    for index in range(3):
        make_student(index)

    result = crud_student.get_all_from_db(db, filters=StudentFilterRequest())

    assert result.meta.total == 3
    assert len(result.data) == 3
    assert result.meta.page == 1
    assert result.meta.limit == 10


def test_search_term_is_case_insensitive_substring(db, make_student):
    make_student(1, first_name="John")
    make_student(2, email="JOHNNY@example.com")
    make_student(3, last_name="Littlejohn")
    make_student(4, first_name="Alice")

    result = crud_student.get_all_from_db(db, filters=StudentFilterRequest(search_term="john"))

    assert result.meta.total == 3
    for record in result.data:
        values = [record.first_name, record.last_name, record.middle_name, record.email,
                  record.contact_no, record.student_id]
        assert any(value and "john" in value.lower() for value in values)


def test_relational_filter_matches_department(db, academics, make_student):
    make_student(1)
    make_student(2, department_id=academics["eee_id"])
    make_student(3, department_id=academics["eee_id"])

    result = crud_student.get_all_from_db(
        db, filters=StudentFilterRequest(academic_department_id=academics["eee_id"])
    )

    assert result.meta.total == 2
    assert all(record.academic_department.id == academics["eee_id"] for record in result.data)


def test_search_and_filters_are_and_combined(db, academics, make_student):
    make_student(1, first_name="John")
    make_student(2, first_name="John", department_id=academics["eee_id"])
    make_student(3, first_name="Mary", department_id=academics["eee_id"])

    result = crud_student.get_all_from_db(
        db,
        filters=StudentFilterRequest(search_term="john", academic_department_id=academics["eee_id"]),
    )

    assert [record.student_id for record in result.data] == ["S0002"]


def test_direct_filter(db, make_student):
    make_student(1)
    make_student(2)
    make_student(3)

    result = crud_student.get_all_from_db(db, filters=StudentFilterRequest(gender="male"))

    assert {record.student_id for record in result.data} == {"S0001", "S0003"}


def test_pagination_and_total_are_independent(db, make_student):
    base = datetime.datetime(2025, 1, 1)
    for index in range(15):
        created = make_student(index)
        _set_created_at(db, created.id, base + datetime.timedelta(minutes=index))

    result = crud_student.get_all_from_db(db, options=PaginationOptions(page=2, limit=10))

    assert result.meta.total == 15
    assert result.meta.page == 2
    assert result.meta.limit == 10
    # 默认按创建时间倒序，第二页为最早的 5 条
    assert [record.student_id for record in result.data] == [
        "S0004", "S0003", "S0002", "S0001", "S0000"
    ]


def test_requested_sort_order(db, make_student):
    make_student(1, first_name="Charlie")
    make_student(2, first_name="alpha")
    make_student(3, first_name="Bravo")

    result = crud_student.get_all_from_db(
        db, options=PaginationOptions(sort_by="student_id", sort_order="asc")
    )

    assert [record.student_id for record in result.data] == ["S0001", "S0002", "S0003"]


def test_update_changes_only_given_fields(db, make_student):
    created = make_student(1)

    updated = crud_student.update_into_db(
        db, id=created.id, obj_in=StudentUpdate(first_name="Renamed")
    )

    assert updated.first_name == "Renamed"
    assert updated.last_name == created.last_name
    assert updated.email == created.email
    assert updated.academic_department is not None


def test_update_can_move_department(db, academics, make_student):
    created = make_student(1)

    updated = crud_student.update_into_db(
        db, id=created.id, obj_in=StudentUpdate(academic_department_id=academics["eee_id"])
    )

    assert updated.academic_department.title == "EEE"


def test_update_missing_raises_not_found(db):
    with pytest.raises(NotFound):
        crud_student.update_into_db(db, id="missing", obj_in=StudentUpdate(first_name="x"))


def test_update_to_duplicate_student_id_is_constraint_violation(db, make_student):
    make_student(1)
    second = make_student(2)

    with pytest.raises(ConstraintViolation):
        crud_student.update_into_db(db, id=second.id, obj_in=StudentUpdate(student_id="S0001"))


def test_delete_returns_previous_state(db, make_student):
    created = make_student(1)

    deleted = crud_student.delete_from_db(db, id=created.id)

    assert deleted.id == created.id
    assert deleted.academic_faculty.title == "Faculty of Science"
    assert crud_student.get_by_id_from_db(db, id=created.id) is None


def test_delete_missing_raises_not_found(db):
    with pytest.raises(NotFound):
        crud_student.delete_from_db(db, id="missing")


def test_search_term_wildcards_match_literally(db, make_student):
    make_student(1, first_name="Ann_Marie")
    make_student(2, first_name="Bob")
    make_student(3, first_name="100%Sure")

    underscore = crud_student.get_all_from_db(db, filters=StudentFilterRequest(search_term="_"))
    percent = crud_student.get_all_from_db(db, filters=StudentFilterRequest(search_term="%"))

    assert [record.first_name for record in underscore.data] == ["Ann_Marie"]
    assert underscore.meta.total == 1
    assert [record.first_name for record in percent.data] == ["100%Sure"]
    assert percent.meta.total == 1


def test_backend_failure_is_rolled_back_and_chained(db, make_student, monkeypatch):
    make_student(1)
    rollbacks = []
    original_rollback = db.rollback

    def failing_query(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    def tracking_rollback():
        rollbacks.append(True)
        original_rollback()

    monkeypatch.setattr(db, "query", failing_query)
    monkeypatch.setattr(db, "rollback", tracking_rollback)

    with pytest.raises(BackendUnavailable) as exc_info:
        crud_student.get_all_from_db(db)

    assert isinstance(exc_info.value.__cause__, OperationalError)
    assert rollbacks == [True]
