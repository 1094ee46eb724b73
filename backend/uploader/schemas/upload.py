"""
文件上传相关的Pydantic模型
用于数据验证和序列化
"""

import base64
import binascii
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ContentsUploadRequest(BaseModel):
    """文件内容上传请求模型"""
    contents: str = Field(..., description="Base64编码的文件内容")
    directory: str = Field(..., description="上传目录")
    type: str = Field(..., description="文件类型（扩展名）")

    @field_validator("contents")
    @classmethod
    def validate_base64(cls, value: str) -> str:
        """校验Base64编码"""
        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError("contents必须是有效的Base64编码") from e
        return value

    def decoded_contents(self) -> bytes:
        """解码后的文件内容"""
        return base64.b64decode(self.contents)


class ConvertRequest(BaseModel):
    """格式转换请求模型"""
    url: str = Field(..., description="已上传文件的URL")
    type: str = Field(..., description="目标文件类型（扩展名）")


class UploadResponseData(BaseModel):
    """上传结果数据"""
    url: Optional[str] = None
    error_code: Optional[int] = None
