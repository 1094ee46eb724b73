"""
上传文件适配器
把multipart上传的文件包装成上传流程使用的统一接口
"""

import os
import shutil
from typing import Optional, Protocol

from fastapi import UploadFile

from uploader.core.storage.models import TransportErrorCode
from uploader.utils.file_utils import get_file_extension


class UploadedFileProtocol(Protocol):
    """
    上传文件协议

    上传流程只通过这些属性访问上传文件，不关心具体的Web框架。
    """

    @property
    def has_error(self) -> bool:
        """是否存在传输层错误"""
        ...

    @property
    def error(self) -> Optional[int]:
        """传输层错误码"""
        ...

    @property
    def extension(self) -> str:
        """声明的文件扩展名（小写，不含点）"""
        ...

    @property
    def size(self) -> int:
        """声明的文件大小（字节）"""
        ...

    def save_as(self, path: str) -> None:
        """
        保存到指定路径

        Raises:
            OSError: 写入失败时抛出
        """
        ...


class FastAPIUploadedFile:
    """FastAPI UploadFile 适配器"""

    def __init__(self, upload_file: UploadFile, error: Optional[int] = None):
        self.upload_file = upload_file
        if error is None and not upload_file.filename:
            error = TransportErrorCode.NO_FILE
        self._error = error

    @property
    def has_error(self) -> bool:
        return self._error is not None

    @property
    def error(self) -> Optional[int]:
        return self._error

    @property
    def extension(self) -> str:
        return get_file_extension(self.upload_file.filename or "")

    @property
    def size(self) -> int:
        if self.upload_file.size is not None:
            return self.upload_file.size

        # 未声明大小时以临时文件实际长度为准
        stream = self.upload_file.file
        position = stream.tell()
        stream.seek(0, os.SEEK_END)
        size = stream.tell()
        stream.seek(position)
        return size

    def save_as(self, path: str) -> None:
        stream = self.upload_file.file
        stream.seek(0)
        with open(path, "wb") as f:
            shutil.copyfileobj(stream, f)


__all__ = [
    'UploadedFileProtocol',
    'FastAPIUploadedFile',
]
