"""
配置工具模块
处理路径计算、配置解析等工具方法
"""

from pathlib import Path
from typing import Dict, Iterable, List, Union


def get_project_root() -> Path:
    """获取项目根目录路径"""
    return Path(__file__).parent.parent.parent.parent


def get_workspace_path(sub_path: str = "") -> Path:
    """获取workspace目录路径"""
    workspace_dir = get_project_root() / "workspace"
    if sub_path:
        return workspace_dir / sub_path
    return workspace_dir


def get_config_path(sub_path: str = "") -> Path:
    """获取config目录路径"""
    config_dir = get_project_root() / "config"
    if sub_path:
        return config_dir / sub_path
    return config_dir


def resolve_workspace_path(value: str) -> Path:
    """
    解析目录配置

    绝对路径原样返回，相对路径解析到workspace目录下
    """
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return get_workspace_path(value)


def parse_list_config(value: Union[str, Iterable], separator: str = ",") -> List[str]:
    """解析逗号分隔的配置字符串为列表"""
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(separator)
    return [str(item).strip().lower() for item in value if str(item).strip()]


def parse_types_config(value: Dict[str, Union[str, Iterable]]) -> Dict[str, List[str]]:
    """
    解析允许的上传类型配置

    Args:
        value: 目录到类型列表的映射，类型列表可以是逗号分隔字符串

    Returns:
        Dict[str, List[str]]: 目录 -> 小写类型列表
    """
    return {
        str(directory): parse_list_config(types)
        for directory, types in (value or {}).items()
    }
