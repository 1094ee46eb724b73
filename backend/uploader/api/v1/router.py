"""
API路由聚合模块
将所有v1版本的路由统一注册，前缀统一在这里管理
"""

from fastapi import APIRouter

from uploader.api.v1.endpoints import upload

api_router = APIRouter()

# ==================== 文件上传路由 ====================
api_router.include_router(upload.router, prefix="/files", tags=["文件上传"])
