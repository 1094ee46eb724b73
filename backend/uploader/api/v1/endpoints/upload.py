"""
文件上传API端点
采用薄路由、重服务的架构设计
"""

from fastapi import APIRouter, Depends, File, Form, UploadFile

from uploader.core.storage import FastAPIUploadedFile, Uploader, get_uploader
from uploader.schemas.common import StandardResponse
from uploader.schemas.upload import ContentsUploadRequest, ConvertRequest
from uploader.services.upload.handler import UploadHandler

router = APIRouter(tags=["文件上传"])


@router.post(
    "/upload",
    response_model=StandardResponse,
    summary="上传文件",
    description="通过multipart表单上传文件到指定目录"
)
async def upload_file(
    file: UploadFile = File(..., description="要上传的文件"),
    directory: str = Form(..., description="上传目录"),
    uploader: Uploader = Depends(get_uploader)
) -> StandardResponse:
    """
    上传文件

    功能流程：
    1. 校验文件大小、目录和类型
    2. 生成保存路径并保存文件，保存路径由服务端决定
    3. 返回文件访问URL
    """
    handler = UploadHandler(uploader)
    return await handler.handle_uploaded_file(FastAPIUploadedFile(file), directory)


@router.post(
    "/upload/contents",
    response_model=StandardResponse,
    summary="上传文件内容",
    description="上传Base64编码的文件内容"
)
async def upload_contents(
    request: ContentsUploadRequest,
    uploader: Uploader = Depends(get_uploader)
) -> StandardResponse:
    """上传文件内容"""
    handler = UploadHandler(uploader)
    return await handler.handle_contents(
        request.decoded_contents(), request.directory, request.type
    )


@router.post(
    "/convert",
    response_model=StandardResponse,
    summary="转换文件格式",
    description="转换已上传文件的格式，结果保存在原文件同目录下"
)
async def convert_file(
    request: ConvertRequest,
    uploader: Uploader = Depends(get_uploader)
) -> StandardResponse:
    """转换文件格式"""
    handler = UploadHandler(uploader)
    return await handler.handle_convert(request.url, request.type)
