from typing import Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

SortOrder = Literal["asc", "desc"]


class PaginationOptions(BaseModel):
    """分页与排序参数，未提供的字段由 calculate_pagination 补默认值"""
    page: Optional[int] = Field(default=None, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None


class PaginationMeta(BaseModel):
    total: int
    page: int
    limit: int


class GenericResponse(BaseModel, Generic[T]):
    meta: PaginationMeta
    data: T


class ApiResponse(BaseModel, Generic[T]):
    """接口统一返回格式"""
    success: bool = True
    message: Optional[str] = None
    meta: Optional[PaginationMeta] = None
    data: Optional[T] = None
