"""
日志消息模板模块
统一管理所有业务日志消息模板，便于维护和国际化
"""

from typing import Dict, Any


class LogMessages:
    """日志消息模板类"""

    # ==================== 通用日志消息 ====================
    OPERATION_SUCCESS = "操作成功完成: {operation_name}"

    # ==================== 文件上传相关 ====================
    FILE_UPLOAD_START = "开始文件上传: {source}"
    FILE_UPLOAD_SUCCESS = "文件上传成功: {url}"
    FILE_UPLOAD_FAILED = "文件上传失败: {save_path}"
    FILE_UPLOAD_REJECTED = "文件上传被拒绝: error_code={error_code}"

    # ==================== 保存路径相关 ====================
    SAVE_PATH_GENERATED = "生成保存路径: {save_path}"
    SAVE_PATH_GENERATOR_REGISTERED = "已注册保存路径生成器: {generator}"

    # ==================== 格式转换相关 ====================
    FILE_CONVERT_START = "开始文件格式转换: {url} -> {target_type}"
    FILE_CONVERT_SUCCESS = "文件格式转换成功: {url}"
    FILE_CONVERT_FAILED = "文件格式转换失败: {url}"
    CONVERT_REQUEST_FAILED = "格式转换服务请求失败: {endpoint}"

    # ==================== 配置相关 ====================
    UPLOAD_POLICY_LOADED = "上传策略加载完成: {root_path}"

    @classmethod
    def format_message(cls, message_template: str, **kwargs: Any) -> str:
        """格式化日志消息模板"""
        return message_template.format(**kwargs)

    @classmethod
    def get_structured_data(cls, **kwargs: Any) -> Dict[str, Any]:
        """获取结构化日志数据"""
        return kwargs


# 全局实例
log_messages = LogMessages()
