"""
业务异常定义
所有对外操作都以这些类型化异常报告失败，由上层请求处理层映射为用户响应
"""

from typing import Optional

from pydantic import ValidationError


class BusinessException(Exception):
    """业务异常基类"""

    code = "business_error"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code

    def __str__(self) -> str:
        return self.message


class NotFoundError(BusinessException):
    """引用的实体不存在"""

    code = "not_found"


class ConflictError(BusinessException):
    """违反唯一性约束（重复选课、重复评价、重复用户名/slug等）"""

    code = "conflict"


class ForbiddenError(BusinessException):
    """调用者不拥有要修改的资源"""

    code = "forbidden"


class InvalidInputError(BusinessException):
    """过滤条件或字段取值超出允许范围"""

    code = "invalid_input"


class InconsistentStateError(BusinessException):
    """按不变式应当存在的实体缺失，说明存在程序缺陷"""

    code = "inconsistent_state"


class AuthenticationRequiredError(BusinessException):
    """需要用户身份的操作未提供用户ID"""

    code = "unauthenticated"


def invalid_input_from(error: ValidationError, prefix: str = "字段校验失败") -> InvalidInputError:
    """将pydantic校验错误转换为InvalidInputError"""
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in item['loc']) or 'value'}: {item['msg']}"
        for item in error.errors()
    )
    return InvalidInputError(f"{prefix}: {details}")


def require_user_id(user_id: Optional[int]) -> int:
    """需要用户身份的操作必须由认证层提供用户ID"""
    if user_id is None:
        raise AuthenticationRequiredError("该操作需要登录用户")
    return user_id
