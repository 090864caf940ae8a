from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from datetime import timedelta
import logging

from app.api.deps import get_db
from app.core.config import settings
from app.core.security import create_access_token
from app.schemas.admin import AdminLogin, Token
from app.crud.admin import admin as crud_admin

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/admin/login", response_model=Token)
def login_admin_access_token(form_data: AdminLogin, db: Session = Depends(get_db)):
    """
    管理员登录获取访问令牌
    """
    admin = crud_admin.authenticate(
        db, username=form_data.username, password=form_data.password
    )
    if not admin:
        logger.warning(f"管理员登录失败: {form_data.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="用户名或密码错误",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    token_data = {
        "sub": str(admin.id),
        "role": "admin"
    }

    return {
        "access_token": create_access_token(
            token_data, expires_delta=access_token_expires
        ),
        "token_type": "bearer",
        "user_id": admin.id,
        "username": admin.username,
        "role": "admin"
    }
