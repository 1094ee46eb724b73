"""
保存路径生成器单元测试
"""

import os
import re
import stat
from datetime import datetime
from unittest.mock import patch

import pytest

from uploader.core.storage import ConfigurationError, create_generator, list_available_generators
from uploader.core.storage.generators import DateSavePathGenerator, UuidSavePathGenerator

FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0)


@pytest.mark.unit
@pytest.mark.generators
class TestDateSavePathGenerator:
    """默认生成器测试类"""

    def test_layout(self, upload_root):
        generator = DateSavePathGenerator(str(upload_root))

        with patch("uploader.core.storage.generators.get_now", return_value=FIXED_NOW):
            save_path = generator("image", "jpg")

        pattern = re.escape(f"{upload_root}/image/20240101/20240101120000_") + r"\d{5}\.jpg"
        assert re.fullmatch(pattern, save_path)

    def test_creates_date_directory(self, upload_root):
        generator = DateSavePathGenerator(str(upload_root), dir_mode=0o750)

        with patch("uploader.core.storage.generators.get_now", return_value=FIXED_NOW):
            generator("file", "txt")

        date_dir = upload_root / "file" / "20240101"
        assert date_dir.is_dir()
        assert stat.S_IMODE(os.stat(date_dir).st_mode) == 0o750

    def test_intermediate_directories_get_dir_mode(self, upload_root):
        generator = DateSavePathGenerator(str(upload_root), dir_mode=0o775)

        old_umask = os.umask(0o077)
        try:
            with patch("uploader.core.storage.generators.get_now", return_value=FIXED_NOW):
                generator("image", "jpg")
        finally:
            os.umask(old_umask)

        assert stat.S_IMODE(os.stat(upload_root / "image").st_mode) == 0o775
        assert stat.S_IMODE(os.stat(upload_root / "image" / "20240101").st_mode) == 0o775

    def test_existing_parent_mode_kept(self, upload_root):
        (upload_root / "image").mkdir()
        os.chmod(upload_root / "image", 0o700)
        generator = DateSavePathGenerator(str(upload_root), dir_mode=0o775)

        with patch("uploader.core.storage.generators.get_now", return_value=FIXED_NOW):
            generator("image", "jpg")

        assert stat.S_IMODE(os.stat(upload_root / "image").st_mode) == 0o700
        assert stat.S_IMODE(os.stat(upload_root / "image" / "20240101").st_mode) == 0o775

    def test_existing_directory_reused(self, upload_root):
        (upload_root / "image" / "20240101").mkdir(parents=True)
        generator = DateSavePathGenerator(str(upload_root))

        with patch("uploader.core.storage.generators.get_now", return_value=FIXED_NOW):
            save_path = generator("image", "png")

        assert save_path.startswith(f"{upload_root}/image/20240101/")

    def test_file_not_created(self, upload_root):
        generator = DateSavePathGenerator(str(upload_root))

        save_path = generator("image", "jpg")

        assert not os.path.exists(save_path)


@pytest.mark.unit
@pytest.mark.generators
class TestUuidSavePathGenerator:
    """UUID生成器测试类"""

    def test_layout(self, upload_root):
        generator = UuidSavePathGenerator(str(upload_root))

        with patch("uploader.core.storage.generators.get_now", return_value=FIXED_NOW):
            save_path = generator("image", "png")

        pattern = re.escape(f"{upload_root}/image/20240101/") + r"[0-9a-f]{32}\.png"
        assert re.fullmatch(pattern, save_path)

    def test_unique_names(self, upload_root):
        generator = UuidSavePathGenerator(str(upload_root))

        assert generator("image", "png") != generator("image", "png")


@pytest.mark.unit
@pytest.mark.generators
class TestGeneratorFactory:
    """生成器工厂测试类"""

    def test_builtin_generators_registered(self):
        available = list_available_generators()

        assert "date" in available
        assert "uuid" in available

    def test_create_generator(self, upload_root):
        generator = create_generator("uuid", str(upload_root), dir_mode=0o700, use_utc=True)

        assert isinstance(generator, UuidSavePathGenerator)
        assert generator.root_path == str(upload_root)
        assert generator.dir_mode == 0o700
        assert generator.use_utc is True

    def test_unknown_generator(self, upload_root):
        with pytest.raises(ConfigurationError) as exc_info:
            create_generator("sequence", str(upload_root))

        assert "sequence" in exc_info.value.message
