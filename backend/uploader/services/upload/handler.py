"""
文件上传业务处理器
调用上传器并把上传结果转换为HTTP响应
"""

from typing import Awaitable, Dict

from fastapi import HTTPException, status

from uploader.core.log_utils import get_logger
from uploader.core.storage import (
    ConfigurationError,
    InvalidPathError,
    InvalidUrlError,
    UploadedFileProtocol,
    UploadErrorCode,
    Uploader,
    UploadResult,
)
from uploader.schemas.common import StandardResponse
from uploader.schemas.upload import UploadResponseData

logger = get_logger(__name__)

# 上传错误码 -> HTTP状态码，未列出的（传输层错误码）按400处理
ERROR_STATUS_MAP: Dict[int, int] = {
    UploadErrorCode.NO_UPLOADED_FILE: status.HTTP_400_BAD_REQUEST,
    UploadErrorCode.NO_CONTENT: status.HTTP_400_BAD_REQUEST,
    UploadErrorCode.NO_LOCAL_FILE: status.HTTP_400_BAD_REQUEST,
    UploadErrorCode.NO_URL: status.HTTP_400_BAD_REQUEST,
    UploadErrorCode.SIZE_EXCEEDED: status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    UploadErrorCode.DIR_NOT_ALLOWED: status.HTTP_400_BAD_REQUEST,
    UploadErrorCode.TYPE_NOT_ALLOWED: status.HTTP_400_BAD_REQUEST,
    UploadErrorCode.UPLOAD_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    UploadErrorCode.CONVERT_FAILED: status.HTTP_502_BAD_GATEWAY,
}

ERROR_MESSAGES: Dict[int, str] = {
    UploadErrorCode.NO_UPLOADED_FILE: "没有上传文件",
    UploadErrorCode.NO_CONTENT: "文件内容为空",
    UploadErrorCode.NO_LOCAL_FILE: "文件不存在",
    UploadErrorCode.NO_URL: "文件URL为空",
    UploadErrorCode.SIZE_EXCEEDED: "文件大小超过限制",
    UploadErrorCode.DIR_NOT_ALLOWED: "上传目录不被允许",
    UploadErrorCode.TYPE_NOT_ALLOWED: "文件类型不被允许",
    UploadErrorCode.UPLOAD_FAILED: "文件保存失败",
    UploadErrorCode.CONVERT_FAILED: "文件格式转换失败",
}


class UploadHandler:
    """文件上传业务处理器"""

    def __init__(self, uploader: Uploader):
        self.uploader = uploader

    async def handle_uploaded_file(
        self,
        uploaded_file: UploadedFileProtocol,
        directory: str
    ) -> StandardResponse:
        """处理multipart文件上传，保存路径由上传器生成"""
        return await self._run(
            self.uploader.upload_from_uploaded_file(uploaded_file, directory),
            "文件上传成功"
        )

    async def handle_contents(
        self,
        contents: bytes,
        directory: str,
        file_type: str
    ) -> StandardResponse:
        """处理文件内容上传，保存路径由上传器生成"""
        return await self._run(
            self.uploader.upload_from_contents(contents, directory, file_type),
            "文件上传成功"
        )

    async def handle_convert(self, url: str, target_type: str) -> StandardResponse:
        """处理格式转换"""
        return await self._run(
            self.uploader.convert(url, target_type),
            "文件格式转换成功"
        )

    async def _run(self, operation: Awaitable[UploadResult], success_message: str) -> StandardResponse:
        try:
            result = await operation
        except (InvalidPathError, InvalidUrlError) as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.message
            ) from e
        except ConfigurationError as e:
            logger.error("上传服务配置错误", exception=e)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=e.message
            ) from e

        if not result.ok:
            self._raise_for_result(result)

        return StandardResponse(
            status="success",
            message=success_message,
            data=UploadResponseData(url=result.url).model_dump()
        )

    @staticmethod
    def _raise_for_result(result: UploadResult) -> None:
        error_code = int(result.error_code)
        detail = ERROR_MESSAGES.get(error_code, "文件上传传输错误")
        if result.message:
            detail = f"{detail}: {result.message}"

        raise HTTPException(
            status_code=ERROR_STATUS_MAP.get(error_code, status.HTTP_400_BAD_REQUEST),
            detail={"error_code": error_code, "message": detail}
        )
