"""
文件工具模块
提供统一的文件处理函数
"""

import os
from pathlib import Path
from typing import Optional, Union


def get_file_size(file_path: Union[str, Path]) -> int:
    """
    获取文件大小（字节）

    Args:
        file_path: 文件路径

    Returns:
        int: 文件大小（字节）
    """
    return os.path.getsize(file_path)


def get_file_extension(file_path: Union[str, Path]) -> str:
    """
    获取文件扩展名（小写，不含点）

    Args:
        file_path: 文件路径或文件名

    Returns:
        str: 文件扩展名（如：jpg, png），没有扩展名时返回空字符串
    """
    return Path(file_path).suffix.lower().lstrip(".")


def ensure_directory_exists(directory_path: Union[str, Path], mode: Optional[int] = None) -> None:
    """
    确保目录存在，不存在则从上到下逐级创建

    每一级新建的目录都设置为 mode，已存在的目录（包括并发创建的）保持原权限。

    Args:
        directory_path: 目录路径
        mode: 新建目录的权限，不受umask影响
    """
    path = Path(directory_path)
    missing = []
    while not path.is_dir():
        missing.append(path)
        if path.parent == path:
            break
        path = path.parent

    for directory in reversed(missing):
        try:
            directory.mkdir()
        except FileExistsError:
            continue
        if mode is not None:
            os.chmod(directory, mode)


def is_writable_directory(directory_path: Union[str, Path]) -> bool:
    """检查目录是否存在且可写"""
    return os.path.isdir(directory_path) and os.access(directory_path, os.W_OK)


def get_human_readable_size(size_bytes: int) -> str:
    """
    将字节大小转换为人类可读的格式

    Args:
        size_bytes: 字节大小

    Returns:
        str: 人类可读的大小（如：1.50 MB）
    """
    if size_bytes == 0:
        return "0 B"

    size_names = ["B", "KB", "MB", "GB", "TB"]
    size = float(size_bytes)
    i = 0
    while size >= 1024 and i < len(size_names) - 1:
        size /= 1024.0
        i += 1

    return f"{size:.2f} {size_names[i]}"
