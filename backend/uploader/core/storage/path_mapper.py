"""
保存路径与访问URL的双向映射

路径和URL之间只做一次固定前缀替换，不做通用的路径/URL解析：
根目录前缀替换为URL前缀，剩余部分（包括开头的分隔符）原样保留。
不做规范化，包含 ".." 段的输入直接拒绝。
"""

from typing import Type

from uploader.core.storage.exceptions import InvalidPathError, InvalidUrlError, StorageError

SEPARATOR = "/"
PARENT_SEGMENT = ".."


def _strip_prefix(value: str, prefix: str, error_class: Type[StorageError], label: str) -> str:
    """
    去掉前缀并返回剩余部分

    剩余部分必须为空或以分隔符开头，"/data/uploads2" 不属于 "/data/uploads"。
    """
    if not isinstance(value, str) or not value.startswith(prefix):
        raise error_class(f"Invalid {label} param: {value!r}", details={label: value, "prefix": prefix})

    remainder = value[len(prefix):]
    if remainder and not remainder.startswith(SEPARATOR):
        raise error_class(f"Invalid {label} param: {value!r}", details={label: value, "prefix": prefix})
    if PARENT_SEGMENT in remainder.split(SEPARATOR):
        raise error_class(f"Parent segment not allowed in {label}: {value!r}", details={label: value})

    return remainder


class PathMapper:
    """
    保存路径 <-> URL 转换器

    无状态，只依赖构建时给定的两个前缀。

    Attributes:
        root_path: 上传根目录（去掉末尾分隔符）
        url_prefix: 上传根目录对应的URL前缀
    """

    def __init__(self, root_path: str, url_prefix: str):
        # 根目录为 "/" 时前缀为空串，剩余部分即完整的绝对路径
        self.root_path = root_path.rstrip(SEPARATOR)
        self.url_prefix = url_prefix.rstrip(SEPARATOR)

    def path_to_url(self, path: str) -> str:
        """
        保存路径转换为访问URL

        Raises:
            InvalidPathError: 路径不在上传根目录下
        """
        return self.url_prefix + _strip_prefix(path, self.root_path, InvalidPathError, "path")

    def url_to_path(self, url: str) -> str:
        """
        访问URL转换为保存路径

        Raises:
            InvalidUrlError: URL不以URL前缀开头
        """
        return self.root_path + _strip_prefix(url, self.url_prefix, InvalidUrlError, "url")

    def directory_of(self, path: str) -> str:
        """
        从保存路径中取出上传目录

        "/root/image/20240101/a.jpg" 去掉根目录后按分隔符拆分为
        ["", "image", ...]，第二段即为目录。

        Raises:
            InvalidPathError: 路径不在上传根目录下，或缺少目录段
        """
        remainder = _strip_prefix(path, self.root_path, InvalidPathError, "path")
        segments = remainder.split(SEPARATOR, 2)
        if len(segments) < 2 or not segments[1]:
            raise InvalidPathError(f"Invalid path param: {path!r}", details={"path": path})
        return segments[1]

    @staticmethod
    def with_type(path: str, new_type: str) -> str:
        """
        替换路径最后一段的扩展名

        最后一段没有扩展名时直接追加。
        """
        head, sep, name = path.rpartition(SEPARATOR)
        stem = name.rsplit(".", 1)[0] if "." in name else name
        return f"{head}{sep}{stem}.{new_type}"
