"""
保存路径生成器
根据上传目录和文件类型生成绝对保存路径

默认布局: root_path/<directory>/<YYYYMMDD>/<YYYYMMDDHHMMSS>_<5位随机数>.<type>
日期目录不存在时按 dir_mode 递归创建。
"""

import random
import uuid
from abc import ABC, abstractmethod
from datetime import datetime

from uploader.core.log_messages import log_messages
from uploader.core.log_utils import get_logger
from uploader.utils.datetime_utils import format_date_segment, format_timestamp_segment, get_now
from uploader.utils.file_utils import ensure_directory_exists

logger = get_logger(__name__)


class BaseSavePathGenerator(ABC):
    """保存路径生成器基类"""

    GENERATOR_NAME = ""

    def __init__(self, root_path: str, dir_mode: int = 0o775, use_utc: bool = False):
        self.root_path = root_path
        self.dir_mode = dir_mode
        self.use_utc = use_utc

    def __call__(self, directory: str, file_type: str) -> str:
        now = get_now(self.use_utc)
        date_dir = f"{self.root_path.rstrip('/')}/{directory}/{format_date_segment(now)}"
        ensure_directory_exists(date_dir, self.dir_mode)

        save_path = f"{date_dir}/{self._build_filename(now)}.{file_type}"
        logger.debug(log_messages.SAVE_PATH_GENERATED, save_path=save_path)
        return save_path

    @abstractmethod
    def _build_filename(self, now: datetime) -> str:
        """生成不含扩展名的文件名"""


class DateSavePathGenerator(BaseSavePathGenerator):
    """
    按时间戳命名的默认生成器

    同一秒内上传到同一目录的文件有极低概率重名，需要严格唯一时使用 UuidSavePathGenerator。
    """

    GENERATOR_NAME = "date"

    def _build_filename(self, now: datetime) -> str:
        return f"{format_timestamp_segment(now)}_{random.randint(10000, 99999)}"


class UuidSavePathGenerator(BaseSavePathGenerator):
    """按UUID命名的生成器"""

    GENERATOR_NAME = "uuid"

    def _build_filename(self, now: datetime) -> str:
        return uuid.uuid4().hex


__all__ = [
    'BaseSavePathGenerator',
    'DateSavePathGenerator',
    'UuidSavePathGenerator',
]
