"""
保存路径生成器工厂
提供生成器注册和创建功能
"""

from typing import Dict, Type

from uploader.core.log_messages import log_messages
from uploader.core.log_utils import get_logger
from uploader.core.storage.exceptions import ConfigurationError
from uploader.core.storage.generators import (
    BaseSavePathGenerator,
    DateSavePathGenerator,
    UuidSavePathGenerator,
)

logger = get_logger(__name__)

DEFAULT_GENERATOR = DateSavePathGenerator.GENERATOR_NAME

# 生成器注册表
_generator_registry: Dict[str, Type[BaseSavePathGenerator]] = {}


def register_generator(name: str, generator_class: Type[BaseSavePathGenerator]) -> None:
    """
    注册保存路径生成器

    Args:
        name: 生成器名称（如 'date', 'uuid'）
        generator_class: 生成器类

    Example:
        >>> register_generator('uuid', UuidSavePathGenerator)
    """
    _generator_registry[name] = generator_class
    logger.debug(log_messages.SAVE_PATH_GENERATOR_REGISTERED, generator=name)


def get_generator_class(name: str) -> Type[BaseSavePathGenerator]:
    """
    获取生成器类

    Raises:
        ConfigurationError: 生成器不存在时抛出
    """
    generator_class = _generator_registry.get(name)
    if not generator_class:
        available = ', '.join(_generator_registry.keys())
        raise ConfigurationError(
            "保存路径生成器 '{}' 不存在，可用生成器: {}".format(name, available)
        )
    return generator_class


def create_generator(
    name: str,
    root_path: str,
    dir_mode: int = 0o775,
    use_utc: bool = False
) -> BaseSavePathGenerator:
    """
    创建生成器实例

    Args:
        name: 生成器名称
        root_path: 上传根目录
        dir_mode: 新建目录权限
        use_utc: 是否使用UTC时间

    Returns:
        BaseSavePathGenerator: 生成器实例，可直接作为 (directory, type) -> path 函数调用

    Raises:
        ConfigurationError: 生成器不存在时抛出
    """
    generator_class = get_generator_class(name)
    return generator_class(root_path, dir_mode=dir_mode, use_utc=use_utc)


def list_available_generators() -> list[str]:
    """列出所有已注册的生成器"""
    return list(_generator_registry.keys())


register_generator(DateSavePathGenerator.GENERATOR_NAME, DateSavePathGenerator)
register_generator(UuidSavePathGenerator.GENERATOR_NAME, UuidSavePathGenerator)


__all__ = [
    'DEFAULT_GENERATOR',
    'register_generator',
    'get_generator_class',
    'create_generator',
    'list_available_generators',
]
