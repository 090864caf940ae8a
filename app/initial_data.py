import logging

from app.core.config import settings
from app.crud.admin import admin as crud_admin
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.schemas.admin import AdminCreate
import app.models  # noqa: F401  注册全部表

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def init_db() -> None:
    """建表并创建初始管理员（已存在则跳过）"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if crud_admin.get_by_username(db, username=settings.FIRST_ADMIN_USERNAME) is None:
            crud_admin.create(
                db,
                obj_in=AdminCreate(
                    username=settings.FIRST_ADMIN_USERNAME,
                    password=settings.FIRST_ADMIN_PASSWORD,
                ),
            )
            logger.info(f"已创建初始管理员 {settings.FIRST_ADMIN_USERNAME}")
    finally:
        db.close()


if __name__ == "__main__":
    logger.info("初始化数据库")
    init_db()
    logger.info("初始化完成")
