"""
应用配置管理模块
统一管理所有配置信息，包括环境变量和文件配置
"""

from typing import Dict, List, Optional

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings

from uploader.utils.config_utils import (
    get_config_path, get_workspace_path, parse_types_config, resolve_workspace_path
)


class Settings(BaseSettings):
    """应用配置类 - 统一管理所有配置信息"""

    # ==================== 基础配置 ====================
    app_name: str = "File Uploader"
    app_version: str = "1.0.0"
    app_debug: bool = False
    app_env: str = "development"

    # ==================== API配置 ====================
    api_v1_str: str = "/api/v1"
    project_name: str = "File Uploader API"

    # ==================== 上传配置 ====================
    # 上传根目录，相对路径解析到workspace目录下
    upload_path: str = "uploads"
    # 上传根目录对应的访问URL前缀
    upload_url: str = "/uploads"
    # 最大上传大小（字节），包含边界值
    max_upload_size: int = 10000000

    # 目录 -> 允许的文件类型（扩展名）
    allowed_types: Dict[str, List[str]] = {
        "image": ["jpg", "jpeg", "png", "gif"],
        "file": ["doc", "docx", "xls", "xlsx", "ppt", "pptx", "pdf", "txt"],
    }

    # 新建文件权限，未设置时由运行环境决定
    file_mode: Optional[int] = None
    # 新建目录权限
    dir_mode: int = 0o775

    # 保存路径生成器名称（date | uuid）
    save_path_generator: str = "date"
    # 保存路径中的日期使用UTC时间，否则使用本地时间
    upload_use_utc: bool = False

    # ==================== 格式转换配置 ====================
    convert_server: Optional[str] = None
    convert_timeout: int = 60

    # ==================== 日志配置 ====================
    log_level: str = "INFO"
    log_file: str = "uploader.log"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ==================== 应用服务配置 ====================
    app_port: int = 8080
    app_host: str = "0.0.0.0"

    # ==================== 验证器 ====================
    @field_validator("allowed_types", mode="before")
    @classmethod
    def normalize_allowed_types(cls, value):
        """统一文件类型为小写，类型列表也可以是逗号分隔字符串"""
        return parse_types_config(value)

    @field_validator("file_mode", "dir_mode", mode="before")
    @classmethod
    def parse_octal_mode(cls, value):
        """权限字符串按八进制解析（如 "0775"）"""
        if isinstance(value, str):
            return int(value, 8) if value.strip() else None
        return value

    @field_validator("upload_url")
    @classmethod
    def strip_upload_url(cls, value: str) -> str:
        """去掉URL前缀末尾的斜杠"""
        return value.rstrip("/")

    @field_validator("convert_server")
    @classmethod
    def empty_convert_server(cls, value: Optional[str]) -> Optional[str]:
        """空字符串视为未配置"""
        return value or None

    # ==================== 计算属性 ====================
    @property
    def absolute_upload_path(self) -> str:
        """获取绝对上传目录路径"""
        return str(resolve_workspace_path(self.upload_path))

    @property
    def workspace_dir(self) -> str:
        """获取workspace目录路径"""
        return str(get_workspace_path())

    model_config = ConfigDict(
        env_file=get_config_path(".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
        validate_default=True
    )


def get_settings() -> Settings:
    """获取应用配置实例"""
    return Settings()


# 全局配置实例
settings = get_settings()
