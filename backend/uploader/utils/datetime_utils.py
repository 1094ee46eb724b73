"""
日期时间工具模块
提供统一的日期时间处理函数
"""

from datetime import datetime, timezone
from typing import Optional

DATE_FORMAT = "%Y%m%d"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


def get_now(use_utc: bool = False) -> datetime:
    """
    获取当前时间

    Args:
        use_utc: 为True时返回UTC时间，否则返回本地时间
    """
    if use_utc:
        return datetime.now(timezone.utc)
    return datetime.now()


def format_datetime(dt: Optional[datetime] = None, format_str: str = "%Y-%m-%d %H:%M:%S") -> str:
    """
    格式化日期时间

    Args:
        dt: 日期时间对象，如果为None则使用当前本地时间
        format_str: 格式化字符串

    Returns:
        str: 格式化后的日期时间字符串
    """
    if dt is None:
        dt = datetime.now()
    return dt.strftime(format_str)


def format_date_segment(dt: datetime) -> str:
    """格式化为目录日期段（YYYYMMDD）"""
    return format_datetime(dt, DATE_FORMAT)


def format_timestamp_segment(dt: datetime) -> str:
    """格式化为文件名时间戳段（YYYYMMDDHHMMSS）"""
    return format_datetime(dt, TIMESTAMP_FORMAT)
