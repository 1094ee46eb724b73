"""
存储服务数据模型
定义上传操作中使用的所有数据结构
"""

import os
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import TYPE_CHECKING, Callable, Dict, FrozenSet, Iterable, Mapping, Optional, Union

from uploader.core.storage.exceptions import ConfigurationError
from uploader.utils.file_utils import is_writable_directory

if TYPE_CHECKING:
    from uploader.core.config import Settings

# (directory, type) -> 绝对保存路径
SavePathGenerator = Callable[[str, str], str]


class UploadErrorCode(IntEnum):
    """上传错误码"""

    # 通过上传文件实例上传时，实例为空
    NO_UPLOADED_FILE = 100
    # 通过文件内容上传时，内容为空
    NO_CONTENT = 101
    # 通过本地文件上传时，本地文件不存在
    NO_LOCAL_FILE = 102
    # 转换文件时，文件URL为空
    NO_URL = 103

    # 文件大小超过允许的最大值
    SIZE_EXCEEDED = 200
    # 上传目录不被允许
    DIR_NOT_ALLOWED = 201
    # 文件类型（扩展名）不被允许
    TYPE_NOT_ALLOWED = 202

    # 上传过程错误（I/O错误等）
    UPLOAD_FAILED = 300
    # 文件格式转换错误
    CONVERT_FAILED = 301


class TransportErrorCode(IntEnum):
    """multipart上传的传输层错误码，原样写入上传结果"""

    INI_SIZE = 1
    FORM_SIZE = 2
    PARTIAL = 3
    NO_FILE = 4
    NO_TMP_DIR = 6
    CANT_WRITE = 7
    EXTENSION = 8


@dataclass(frozen=True)
class UploadResult:
    """
    上传结果

    error_code 与 url 有且只有一个被设置：失败时设置 error_code，
    成功时设置 url。调用方必须先检查 error_code。

    Attributes:
        error_code: 错误码，None表示成功
        message: 错误详情（可为空）
        url: 文件访问URL，仅成功时设置
    """
    error_code: Optional[int] = None
    message: str = ""
    url: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.error_code is None) == (self.url is None):
            raise ValueError("UploadResult必须且只能设置error_code或url之一")

    @classmethod
    def success(cls, url: str) -> "UploadResult":
        """构建成功结果"""
        return cls(url=url)

    @classmethod
    def failure(cls, error_code: int, message: str = "") -> "UploadResult":
        """构建失败结果"""
        return cls(error_code=error_code, message=message)

    @property
    def ok(self) -> bool:
        """是否上传成功"""
        return self.error_code is None


def _freeze_types(allowed_types: Mapping[str, Iterable[str]]) -> Dict[str, FrozenSet[str]]:
    return {
        str(directory): frozenset(str(t) for t in types)
        for directory, types in allowed_types.items()
    }


@dataclass(frozen=True)
class UploadPolicy:
    """
    上传策略

    进程启动时构建一次，之后不可修改。构建时校验上传根目录，
    需要修改配置时必须重新构建整个策略。

    Attributes:
        root_path: 上传根目录（绝对路径，已存在且可写）
        url_prefix: 与上传根目录一一对应的URL前缀
        max_size_bytes: 最大上传大小（字节，包含边界值）
        allowed_types: 目录 -> 允许的文件类型集合
        save_path_generator: 自定义保存路径生成函数，为None时使用默认生成器
        dir_mode: 默认生成器新建目录的权限
        file_mode: 新建文件的权限，为None时不修改
        use_utc: 默认生成器使用UTC时间
    """
    root_path: str
    url_prefix: str
    max_size_bytes: int
    allowed_types: Mapping[str, FrozenSet[str]] = field(default_factory=dict)
    save_path_generator: Optional[SavePathGenerator] = None
    dir_mode: int = 0o775
    file_mode: Optional[int] = None
    use_utc: bool = False

    def __post_init__(self) -> None:
        root_path = os.fspath(self.root_path)
        if not os.path.isdir(root_path):
            raise ConfigurationError(
                f"上传目录不存在: {root_path}", details={"root_path": root_path}
            )
        if not is_writable_directory(root_path):
            raise ConfigurationError(
                f"上传目录不可写: {root_path}", details={"root_path": root_path}
            )

        object.__setattr__(self, "root_path", os.path.realpath(root_path))
        object.__setattr__(self, "url_prefix", self.url_prefix.rstrip("/"))
        object.__setattr__(self, "allowed_types", _freeze_types(self.allowed_types))

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        save_path_generator: Optional[Union[str, SavePathGenerator]] = None
    ) -> "UploadPolicy":
        """
        根据应用配置构建上传策略

        Args:
            settings: 应用配置
            save_path_generator: 生成器名称或函数，不指定则使用配置中的名称

        Returns:
            UploadPolicy: 上传策略

        Raises:
            ConfigurationError: 上传目录不可用或生成器不存在时抛出
        """
        from uploader.core.storage.factory import DEFAULT_GENERATOR, create_generator

        root_path = settings.absolute_upload_path
        generator = save_path_generator or settings.save_path_generator

        # 先校验根目录，生成器需要使用规范化后的路径
        policy = cls(
            root_path=root_path,
            url_prefix=settings.upload_url,
            max_size_bytes=settings.max_upload_size,
            allowed_types=settings.allowed_types,
            dir_mode=settings.dir_mode,
            file_mode=settings.file_mode,
            use_utc=settings.upload_use_utc,
        )

        if isinstance(generator, str):
            if not generator or generator == DEFAULT_GENERATOR:
                return policy
            generator = create_generator(
                generator, policy.root_path, dir_mode=policy.dir_mode, use_utc=policy.use_utc
            )

        return replace(policy, save_path_generator=generator)

    def is_directory_allowed(self, directory: str) -> bool:
        """目录是否在允许列表中"""
        return directory in self.allowed_types

    def is_type_allowed(self, directory: str, file_type: str) -> bool:
        """文件类型是否被该目录允许"""
        return file_type in self.allowed_types.get(directory, frozenset())


__all__ = [
    'SavePathGenerator',
    'UploadErrorCode',
    'TransportErrorCode',
    'UploadResult',
    'UploadPolicy',
]
