from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from pydantic import BaseModel
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.config import settings
from app.core.security import decode_access_token
from app.crud.admin import admin as crud_admin

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/admin/login")


class TokenData(BaseModel):
    sub: Optional[str] = None
    role: Optional[str] = None


def get_current_user(
        db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)
) -> dict:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_access_token(token)
        token_data = TokenData(sub=payload.get("sub"), role=payload.get("role"))
    except JWTError:
        raise credentials_exception

    if token_data.sub is None or token_data.role is None:
        raise credentials_exception

    if token_data.role == "admin":
        user = crud_admin.get(db, id=int(token_data.sub))
        if user is None:
            raise credentials_exception
        return {"id": user.id, "username": user.username, "role": "admin"}
    raise credentials_exception


def get_current_admin(
        current_user: dict = Depends(get_current_user),
) -> dict:
    if current_user.get("role") != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="The user doesn't have enough privileges",
        )
    return current_user
