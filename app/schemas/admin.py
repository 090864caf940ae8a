from pydantic import BaseModel


class AdminBase(BaseModel):
    username: str


class AdminCreate(AdminBase):
    password: str


class AdminLogin(BaseModel):
    username: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str
    role: str
    username: str
    user_id: int
