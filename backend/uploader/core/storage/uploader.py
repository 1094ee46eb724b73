"""
文件上传器
校验上传策略、确定保存路径并写入文件，支持三种上传来源和格式转换

上传流程:
1. 检查来源相关的前置条件（上传文件为空、内容为空、本地文件不存在）
2. 指定了保存路径时，从保存路径重新推导上传目录
3. 按顺序检查大小、目录、类型
4. 生成或使用指定的保存路径，写入文件
5. 保存路径转换为访问URL
"""

import asyncio
import os
from functools import partial
from typing import Callable, Optional, TypeVar, Union

from uploader.core.log_messages import log_messages
from uploader.core.log_utils import get_logger
from uploader.core.storage.converter import ConvertClient
from uploader.core.storage.exceptions import ConfigurationError, ConvertError
from uploader.core.storage.generators import DateSavePathGenerator
from uploader.core.storage.models import UploadErrorCode, UploadPolicy, UploadResult
from uploader.core.storage.path_mapper import PathMapper
from uploader.core.storage.uploaded_file import UploadedFileProtocol
from uploader.core.storage.writer import LocalFileWriter
from uploader.utils.file_utils import get_file_extension, get_file_size, get_human_readable_size

logger = get_logger(__name__)

T = TypeVar("T")


class Uploader:
    """
    文件上传器

    除配置错误和内部路径错误外，所有失败都通过 UploadResult.error_code 返回。

    Attributes:
        policy: 上传策略
        mapper: 路径与URL转换器
        writer: 本地文件写入器
        converter: 格式转换服务客户端，未配置时为None
    """

    def __init__(
        self,
        policy: UploadPolicy,
        writer: Optional[LocalFileWriter] = None,
        converter: Optional[ConvertClient] = None
    ):
        self.policy = policy
        self.mapper = PathMapper(policy.root_path, policy.url_prefix)
        self.writer = writer or LocalFileWriter(policy.file_mode)
        self.converter = converter
        self._default_generator = DateSavePathGenerator(
            policy.root_path, dir_mode=policy.dir_mode, use_utc=policy.use_utc
        )

    # ==================== 上传入口 ====================

    async def upload_from_uploaded_file(
        self,
        uploaded_file: Optional[UploadedFileProtocol],
        directory: str,
        save_path: Optional[str] = None
    ) -> UploadResult:
        """
        通过上传文件实例上传

        Args:
            uploaded_file: 上传文件实例
            directory: 上传目录
            save_path: 保存路径，不指定则自动生成

        Returns:
            UploadResult: 上传结果，传输层错误码原样返回

        Raises:
            InvalidPathError: 指定的保存路径不在上传根目录下
        """
        logger.info(log_messages.FILE_UPLOAD_START, source="uploaded_file", directory=directory)

        if uploaded_file is None:
            return self._reject(UploadErrorCode.NO_UPLOADED_FILE)
        if uploaded_file.has_error:
            return self._reject(uploaded_file.error, "上传文件传输错误")

        if save_path is not None:
            directory = self.mapper.directory_of(save_path)
        file_type = uploaded_file.extension

        error_code = self.check_policy(uploaded_file.size, directory, file_type)
        if error_code is not None:
            return self._reject(error_code)

        try:
            if save_path is None:
                save_path = self.resolve_save_path(directory, file_type)
            await self._run_in_executor(uploaded_file.save_as, save_path)
            await self._run_in_executor(self.writer.apply_file_mode, save_path)
        except OSError as e:
            return self._write_failed(save_path, e)

        return self._succeed(save_path, uploaded_file.size)

    async def upload_from_contents(
        self,
        contents: Union[bytes, str, None],
        directory: str,
        file_type: str,
        save_path: Optional[str] = None
    ) -> UploadResult:
        """
        通过文件内容上传

        Args:
            contents: 文件内容（二进制），字符串按UTF-8编码
            directory: 上传目录
            file_type: 文件类型（扩展名）
            save_path: 保存路径，不指定则自动生成，已存在的文件会被覆盖

        Returns:
            UploadResult: 上传结果

        Raises:
            InvalidPathError: 指定的保存路径不在上传根目录下
        """
        logger.info(log_messages.FILE_UPLOAD_START, source="contents", directory=directory)

        if not contents:
            return self._reject(UploadErrorCode.NO_CONTENT)
        if isinstance(contents, str):
            contents = contents.encode("utf-8")

        if save_path is not None:
            directory = self.mapper.directory_of(save_path)

        size = len(contents)
        error_code = self.check_policy(size, directory, file_type)
        if error_code is not None:
            return self._reject(error_code)

        try:
            if save_path is None:
                save_path = self.resolve_save_path(directory, file_type)
            await self._run_in_executor(self.writer.write, save_path, contents)
        except OSError as e:
            return self._write_failed(save_path, e)

        return self._succeed(save_path, size)

    async def upload_from_local_file(
        self,
        local_file_path: str,
        directory: str,
        save_path: Optional[str] = None
    ) -> UploadResult:
        """
        通过本地文件上传

        Args:
            local_file_path: 本地文件路径
            directory: 上传目录
            save_path: 保存路径，不指定则自动生成

        Returns:
            UploadResult: 上传结果

        Raises:
            InvalidPathError: 指定的保存路径不在上传根目录下
        """
        logger.info(log_messages.FILE_UPLOAD_START, source="local_file", directory=directory)

        if not local_file_path or not os.path.isfile(local_file_path):
            return self._reject(UploadErrorCode.NO_LOCAL_FILE, "本地文件不存在")
        size = get_file_size(local_file_path)

        if save_path is not None:
            directory = self.mapper.directory_of(save_path)
        file_type = get_file_extension(local_file_path)

        error_code = self.check_policy(size, directory, file_type)
        if error_code is not None:
            return self._reject(error_code)

        try:
            if save_path is None:
                save_path = self.resolve_save_path(directory, file_type)
            await self._run_in_executor(self.writer.copy, local_file_path, save_path)
        except OSError as e:
            return self._write_failed(save_path, e)

        return self._succeed(save_path, size)

    async def convert(self, source_url: str, target_type: str) -> UploadResult:
        """
        转换已上传文件的格式，转换结果保存在原文件同目录下

        保存路径与原文件只有扩展名不同，已存在时覆盖。

        Args:
            source_url: 已上传文件的URL
            target_type: 目标文件类型（扩展名）

        Returns:
            UploadResult: 转换后文件的上传结果

        Raises:
            ConfigurationError: 未配置格式转换服务
            InvalidUrlError: URL不以上传URL前缀开头
        """
        if self.converter is None:
            raise ConfigurationError('The "convert_server" property must be set.')

        logger.info(log_messages.FILE_CONVERT_START, url=source_url, target_type=target_type)

        if not source_url:
            return self._reject(UploadErrorCode.NO_URL)

        source_path = self.mapper.url_to_path(source_url)
        try:
            contents = await self._run_in_executor(_read_file, source_path)
        except OSError:
            return self._reject(UploadErrorCode.NO_LOCAL_FILE, "原文件不存在或不可读")

        try:
            converted = await self.converter.convert(contents, target_type)
        except ConvertError as e:
            logger.warning(log_messages.FILE_CONVERT_FAILED, url=source_url, error=str(e))
            return UploadResult.failure(UploadErrorCode.CONVERT_FAILED, e.message)

        directory = self.mapper.directory_of(source_path)
        save_path = self.mapper.with_type(source_path, target_type)
        result = await self.upload_from_contents(converted, directory, target_type, save_path)

        if result.ok:
            logger.info(log_messages.FILE_CONVERT_SUCCESS, url=result.url)
        return result

    # ==================== 策略与路径 ====================

    def check_policy(self, size: int, directory: str, file_type: str) -> Optional[UploadErrorCode]:
        """
        检查上传策略

        按大小、目录、类型的顺序检查，遇到第一个错误即返回。

        Returns:
            Optional[UploadErrorCode]: 错误码，通过时返回None
        """
        if size > self.policy.max_size_bytes:
            return UploadErrorCode.SIZE_EXCEEDED
        if not self.policy.is_directory_allowed(directory):
            return UploadErrorCode.DIR_NOT_ALLOWED
        if not self.policy.is_type_allowed(directory, file_type):
            return UploadErrorCode.TYPE_NOT_ALLOWED
        return None

    def resolve_save_path(self, directory: str, file_type: str) -> str:
        """
        生成保存路径

        配置了自定义生成器时直接使用其结果，否则使用默认生成器。

        Raises:
            OSError: 默认生成器创建日期目录失败
        """
        if self.policy.save_path_generator is not None:
            return self.policy.save_path_generator(directory, file_type)
        return self._default_generator(directory, file_type)

    def path_to_url(self, path: str) -> str:
        """保存路径转换为访问URL"""
        return self.mapper.path_to_url(path)

    def url_to_path(self, url: str) -> str:
        """访问URL转换为保存路径"""
        return self.mapper.url_to_path(url)

    async def _run_in_executor(self, func: Callable[..., T], *args) -> T:
        """在线程池中运行阻塞的文件操作"""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, partial(func, *args))

    # ==================== 结果构建 ====================

    def _reject(self, error_code: int, detail: str = "") -> UploadResult:
        logger.warning(log_messages.FILE_UPLOAD_REJECTED, error_code=int(error_code))
        return UploadResult.failure(error_code, detail)

    def _write_failed(self, save_path: Optional[str], exception: OSError) -> UploadResult:
        logger.error(log_messages.FILE_UPLOAD_FAILED, exception=exception, save_path=save_path)
        return UploadResult.failure(UploadErrorCode.UPLOAD_FAILED, str(exception))

    def _succeed(self, save_path: str, size: int) -> UploadResult:
        url = self.mapper.path_to_url(save_path)
        logger.info(
            log_messages.FILE_UPLOAD_SUCCESS,
            url=url,
            size=get_human_readable_size(size)
        )
        return UploadResult.success(url)


def _read_file(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


__all__ = ['Uploader']
