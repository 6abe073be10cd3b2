"""
自定义异常类
HTTP传输层抛出的错误，API函数原样向上传递
"""

from typing import Any, Dict, Optional


class BaseApplicationError(Exception):
    """应用基础异常类"""

    def __init__(
        self,
        message: str,
        error_code: str = None,
        details: Dict[str, Any] = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class TransportError(BaseApplicationError):
    """传输层异常"""
    pass


class NetworkError(TransportError):
    """网络异常（连接失败、超时）"""
    pass


class HTTPStatusError(TransportError):
    """非2xx响应"""

    def __init__(
        self,
        message: str,
        status_code: int,
        payload: Any = None,
        error_code: str = None,
        details: Dict[str, Any] = None
    ):
        self.status_code = status_code
        self.payload = payload
        super().__init__(message, error_code=error_code, details=details)


class ResponseDecodeError(TransportError):
    """响应体无法解析或结构不匹配"""
    pass


class BackendError(TransportError):
    """后端返回 success=false 的业务错误"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Dict[str, Any] = None
    ):
        super().__init__(message, error_code=error_code or "BACKEND_ERROR", details=details)
