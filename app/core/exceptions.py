from typing import Optional


class ServiceError(Exception):
    """数据访问层异常基类"""

    default_detail = "服务器内部错误"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ConstraintViolation(ServiceError):
    """唯一约束或外键约束冲突"""

    default_detail = "数据违反唯一性或关联约束"


class NotFound(ServiceError):
    """更新或删除的目标记录不存在"""

    default_detail = "记录不存在"


class BackendUnavailable(ServiceError):
    """数据库连接或基础设施故障"""

    default_detail = "数据库服务暂不可用"
