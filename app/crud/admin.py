from typing import Optional
from sqlalchemy.orm import Session
from app.models.admin import Administrator
from app.schemas.admin import AdminCreate
from app.core.security import get_password_hash, verify_password
from .base import CRUDBase, db_errors


class CRUDAdmin(CRUDBase[Administrator, AdminCreate, AdminCreate]):
    def create(self, db: Session, *, obj_in: AdminCreate) -> Administrator:
        db_obj = Administrator(
            username=obj_in.username,
            password=get_password_hash(obj_in.password),
        )
        with db_errors(db):
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        return db_obj

    def get_by_username(self, db: Session, *, username: str) -> Optional[Administrator]:
        with db_errors(db):
            return db.query(Administrator).filter(Administrator.username == username).first()

    def authenticate(self, db: Session, *, username: str, password: str) -> Optional[Administrator]:
        admin = self.get_by_username(db, username=username)
        if not admin:
            return None
        if not verify_password(password, admin.password):
            return None
        return admin


admin = CRUDAdmin(Administrator)
