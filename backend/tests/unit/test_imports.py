"""
模块导入测试
测试所有模块的导入是否正常
"""

import pytest


@pytest.mark.unit
@pytest.mark.imports
class TestModuleImports:
    """模块导入测试类"""

    def test_config_import(self):
        """测试配置模块导入"""
        from uploader.core.config import settings
        assert settings is not None

    def test_storage_imports(self):
        """测试存储模块导入"""
        from uploader.core.storage import ConvertClient, PathMapper, Uploader, UploadPolicy
        assert Uploader is not None
        assert UploadPolicy is not None
        assert PathMapper is not None
        assert ConvertClient is not None

    def test_service_imports(self):
        """测试服务模块导入"""
        from uploader.services.upload.handler import UploadHandler
        assert UploadHandler is not None

    def test_api_imports(self):
        """测试API模块导入"""
        from uploader.api.v1.endpoints.upload import router as upload_router
        from uploader.api.v1.router import api_router
        assert upload_router is not None
        assert api_router is not None
