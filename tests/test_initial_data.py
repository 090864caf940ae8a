from app.core.config import settings
from app.crud.admin import admin as crud_admin
from app.initial_data import init_db


def test_init_db_creates_first_admin_once(db):
    init_db()
    init_db()

    admin = crud_admin.authenticate(
        db, username=settings.FIRST_ADMIN_USERNAME, password=settings.FIRST_ADMIN_PASSWORD
    )
    assert admin is not None
