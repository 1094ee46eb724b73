"""
格式转换服务客户端
把文件内容发送到远程转换服务，返回转换后的内容
"""

import httpx

from uploader.core.log_messages import log_messages
from uploader.core.log_utils import get_logger
from uploader.core.storage.exceptions import ConvertError, HTTPError, NetworkError

logger = get_logger(__name__)


class ConvertClient:
    """
    格式转换服务客户端

    请求格式: POST <endpoint>?type=<目标类型>，请求体为原文件内容，
    响应体为转换后的文件内容。不做重试，超时由 timeout 控制。

    Attributes:
        endpoint: 转换服务地址
        timeout: 请求超时（秒）
    """

    def __init__(self, endpoint: str, timeout: float = 60.0):
        self.endpoint = endpoint
        self.timeout = timeout

    async def convert(self, data: bytes, target_type: str) -> bytes:
        """
        转换文件格式

        Args:
            data: 原文件内容
            target_type: 目标文件类型（扩展名）

        Returns:
            bytes: 转换后的文件内容

        Raises:
            HTTPError: 转换服务返回非2xx响应
            NetworkError: 网络请求失败
            ConvertError: 转换服务返回空内容
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.endpoint,
                    params={"type": target_type},
                    content=data,
                    headers={"Content-Type": "application/octet-stream"}
                )
                response.raise_for_status()
                converted = response.content

        except httpx.HTTPStatusError as e:
            logger.error(
                log_messages.CONVERT_REQUEST_FAILED,
                endpoint=self.endpoint,
                status_code=e.response.status_code
            )
            raise HTTPError(
                f"格式转换失败 (HTTP {e.response.status_code})",
                status_code=e.response.status_code
            ) from e
        except httpx.RequestError as e:
            logger.error(
                log_messages.CONVERT_REQUEST_FAILED,
                exception=e,
                endpoint=self.endpoint
            )
            raise NetworkError(f"格式转换失败 (网络错误): {str(e)}") from e

        if not converted:
            raise ConvertError("格式转换服务返回空内容", details={"target_type": target_type})

        return converted


__all__ = ['ConvertClient']
