"""
本地文件写入器
负责把字节内容或本地文件写到保存路径
"""

import os
import shutil
from typing import Optional


class LocalFileWriter:
    """
    本地文件写入器

    写入失败时抛出 OSError，由调用方转换为上传错误码。

    Attributes:
        file_mode: 新建文件权限，为None时不修改
    """

    def __init__(self, file_mode: Optional[int] = None):
        self.file_mode = file_mode

    def write(self, path: str, data: bytes) -> None:
        """写入字节内容，已存在的文件会被覆盖"""
        with open(path, "wb") as f:
            f.write(data)
        self.apply_file_mode(path)

    def copy(self, src_path: str, dest_path: str) -> None:
        """复制本地文件内容到保存路径"""
        shutil.copyfile(src_path, dest_path)
        self.apply_file_mode(dest_path)

    def apply_file_mode(self, path: str) -> None:
        """按配置设置文件权限"""
        if self.file_mode is not None:
            os.chmod(path, self.file_mode)
