"""
存储服务异常定义
定义存储模块中使用的所有异常类型

这些异常只用于配置错误和内部路径错误，单次上传的失败通过
UploadResult.error_code 返回，不会抛出。
"""

from typing import Any, Dict, Optional


class StorageError(Exception):
    """
    存储操作基础异常

    所有存储相关异常的基类。

    Attributes:
        message: 错误消息
        code: 错误码
        details: 错误详情
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigurationError(StorageError):
    """存储配置错误（上传目录不可用、未配置转换服务等）"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="CONFIG_ERROR", details=details)


class InvalidPathError(StorageError):
    """保存路径不在上传根目录下或格式错误"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="INVALID_PATH", details=details)


class InvalidUrlError(StorageError):
    """文件URL不以上传URL前缀开头或格式错误"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="INVALID_URL", details=details)


class ConvertError(StorageError):
    """格式转换服务调用失败"""

    def __init__(
        self,
        message: str,
        code: str = "CONVERT_ERROR",
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, code=code, details=details)


class HTTPError(ConvertError):
    """转换服务返回非2xx响应"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, code="HTTP_ERROR", details=details)
        self.status_code = status_code


class NetworkError(ConvertError):
    """转换服务网络请求错误"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="NETWORK_ERROR", details=details)


__all__ = [
    'StorageError',
    'ConfigurationError',
    'InvalidPathError',
    'InvalidUrlError',
    'ConvertError',
    'HTTPError',
    'NetworkError',
]
