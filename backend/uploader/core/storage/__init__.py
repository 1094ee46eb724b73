"""
存储服务模块
提供上传策略、路径映射和文件上传器的统一访问接口
"""

from typing import Optional

from uploader.core.config import Settings, settings as default_settings
from uploader.core.log_messages import log_messages
from uploader.core.log_utils import get_logger
from uploader.core.storage.converter import ConvertClient
from uploader.core.storage.exceptions import *
from uploader.core.storage.factory import (
    create_generator,
    list_available_generators,
    register_generator,
)
from uploader.core.storage.models import *
from uploader.core.storage.path_mapper import PathMapper
from uploader.core.storage.uploaded_file import FastAPIUploadedFile, UploadedFileProtocol
from uploader.core.storage.uploader import Uploader
from uploader.core.storage.writer import LocalFileWriter

logger = get_logger(__name__)

_uploader: Optional[Uploader] = None


def build_uploader(config: Optional[Settings] = None) -> Uploader:
    """
    根据配置构建上传器

    每次调用都会重新构建并校验上传策略。

    Args:
        config: 应用配置，不指定则使用全局配置

    Returns:
        Uploader: 上传器实例

    Raises:
        ConfigurationError: 上传目录不存在或不可写时抛出
    """
    config = config or default_settings
    policy = UploadPolicy.from_settings(config)

    converter = None
    if config.convert_server:
        converter = ConvertClient(config.convert_server, timeout=config.convert_timeout)

    logger.info(log_messages.UPLOAD_POLICY_LOADED, root_path=policy.root_path)
    return Uploader(policy, converter=converter)


def get_uploader() -> Uploader:
    """
    获取全局上传器实例

    首次调用时根据全局配置构建，之后复用同一实例。

    Example:
        >>> uploader = get_uploader()
        >>> result = await uploader.upload_from_contents(b"...", "image", "png")
    """
    global _uploader
    if _uploader is None:
        _uploader = build_uploader()
    return _uploader


__all__ = [
    # 工厂函数
    'build_uploader',
    'get_uploader',
    'create_generator',
    'list_available_generators',
    'register_generator',
    # 核心类
    'Uploader',
    'PathMapper',
    'ConvertClient',
    'LocalFileWriter',
    'FastAPIUploadedFile',
    'UploadedFileProtocol',
]
