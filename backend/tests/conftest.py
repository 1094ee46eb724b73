"""
测试配置和fixtures
为所有测试提供共享的上传目录、上传策略和上传器
"""

import pytest

from uploader.core.storage import UploadPolicy, Uploader

TEST_URL_PREFIX = "/up"
TEST_MAX_SIZE = 1000
TEST_ALLOWED_TYPES = {
    "image": ["jpg", "png"],
    "file": ["txt", "pdf"],
}


@pytest.fixture(scope="function")
def upload_root(tmp_path):
    """临时上传根目录"""
    root = tmp_path / "up"
    root.mkdir()
    return root


@pytest.fixture(scope="function")
def policy(upload_root):
    """测试上传策略"""
    return UploadPolicy(
        root_path=str(upload_root),
        url_prefix=TEST_URL_PREFIX,
        max_size_bytes=TEST_MAX_SIZE,
        allowed_types=TEST_ALLOWED_TYPES,
    )


@pytest.fixture(scope="function")
def uploader(policy):
    """未配置格式转换服务的上传器"""
    return Uploader(policy)


# 测试标记配置
def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "logging: 日志相关测试")
    config.addinivalue_line("markers", "path_mapper: 路径映射测试")
    config.addinivalue_line("markers", "uploader: 上传器测试")
    config.addinivalue_line("markers", "converter: 格式转换测试")
    config.addinivalue_line("markers", "generators: 保存路径生成器测试")
    config.addinivalue_line("markers", "models: 数据模型测试")
    config.addinivalue_line("markers", "config: 配置测试")
    config.addinivalue_line("markers", "api: 接口测试")
    config.addinivalue_line("markers", "imports: 模块导入测试")
