"""
日志系统单元测试
快速执行，无外部依赖

测试 UnifiedLogger 的格式化、结构化数据和调试开关
"""

import pytest
import logging
from unittest.mock import patch

from uploader.core.log_utils import UnifiedLogger, get_logger
from uploader.core.log_messages import LogMessages, log_messages


@pytest.mark.unit
@pytest.mark.logging
class TestUnifiedLogger:
    """UnifiedLogger 单元测试类"""

    def setup_method(self):
        """每个测试方法执行前的设置"""
        self.logger_name = "test_logger"
        self.unified_logger = UnifiedLogger(self.logger_name)

    def test_init(self):
        """测试 UnifiedLogger 初始化"""
        assert self.unified_logger.name == self.logger_name
        assert isinstance(self.unified_logger.logger, logging.Logger)
        assert self.unified_logger.logger.name == self.logger_name

    def test_info_with_template(self):
        """测试使用上传消息模板记录日志"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            self.unified_logger.info(log_messages.FILE_UPLOAD_SUCCESS, url="/up/image/a.jpg")

            mock_info.assert_called_once()
            call_args = mock_info.call_args
            assert call_args[0][0] == "文件上传成功: /up/image/a.jpg"
            assert call_args[1]['extra']['url'] == "/up/image/a.jpg"
            assert call_args[1]['extra']['log_module'] == self.logger_name

    def test_info_with_extra_fields_not_in_template(self):
        """测试模板之外的参数只作为结构化数据记录"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            self.unified_logger.info(
                log_messages.FILE_UPLOAD_START, source="contents", directory="image"
            )

            call_args = mock_info.call_args
            assert call_args[0][0] == "开始文件上传: contents"
            assert call_args[1]['extra']['directory'] == "image"

    def test_info_with_formatted_dict(self):
        """测试已格式化且包含花括号的消息不会被二次格式化"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            policy = {"image": ["jpg", "png"]}
            message = f"上传策略: {policy}"

            self.unified_logger.info(message)

            assert mock_info.call_args[0][0] == message

    def test_info_with_invalid_format(self):
        """测试格式化失败时使用原始消息"""
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            self.unified_logger.info(log_messages.FILE_UPLOAD_SUCCESS, wrong_param="测试")

            assert mock_info.call_args[0][0] == log_messages.FILE_UPLOAD_SUCCESS

    def test_error_with_exception(self):
        """测试记录带异常的错误日志"""
        with patch.object(self.unified_logger.logger, 'error') as mock_error:
            exception = PermissionError("Permission denied")

            self.unified_logger.error(
                log_messages.FILE_UPLOAD_FAILED, exception=exception, save_path="/up/a.jpg"
            )

            call_args = mock_error.call_args
            assert call_args[0][0] == "文件上传失败: /up/a.jpg"
            assert call_args[1]['extra']['exception_type'] == 'PermissionError'
            assert call_args[1]['extra']['exception_message'] == 'Permission denied'
            assert call_args[1]['exc_info'] == exception

    def test_error_without_exception(self):
        """测试记录不带异常的错误日志"""
        with patch.object(self.unified_logger.logger, 'error') as mock_error:
            self.unified_logger.error("错误消息")

            call_args = mock_error.call_args
            assert call_args[0][0] == "错误消息"
            assert 'exc_info' not in call_args[1]

    def test_warning_with_error_code(self):
        """测试记录上传拒绝警告"""
        with patch.object(self.unified_logger.logger, 'warning') as mock_warning:
            self.unified_logger.warning(log_messages.FILE_UPLOAD_REJECTED, error_code=202)

            assert mock_warning.call_args[0][0] == "文件上传被拒绝: error_code=202"

    @patch('uploader.core.log_utils.settings')
    def test_debug_when_debug_enabled(self, mock_settings):
        """测试在调试模式开启时记录调试日志"""
        mock_settings.app_debug = True

        with patch.object(self.unified_logger.logger, 'debug') as mock_debug:
            self.unified_logger.debug("调试消息")

            mock_debug.assert_called_once()
            assert mock_debug.call_args[0][0] == "调试消息"

    @patch('uploader.core.log_utils.settings')
    def test_debug_when_debug_disabled(self, mock_settings):
        """测试在调试模式关闭时不记录调试日志"""
        mock_settings.app_debug = False

        with patch.object(self.unified_logger.logger, 'debug') as mock_debug:
            self.unified_logger.debug("调试消息")

            mock_debug.assert_not_called()

    def test_critical_with_simple_message(self):
        """测试记录严重错误日志"""
        with patch.object(self.unified_logger.logger, 'critical') as mock_critical:
            self.unified_logger.critical("严重错误")

            assert mock_critical.call_args[0][0] == "严重错误"


@pytest.mark.unit
@pytest.mark.logging
class TestGetLogger:
    """测试 get_logger 工厂函数"""

    def test_get_logger_returns_unified_logger(self):
        logger = get_logger("test_module")

        assert isinstance(logger, UnifiedLogger)
        assert logger.name == "test_module"

    def test_get_logger_caching(self):
        assert get_logger("test_module") is get_logger("test_module")

    def test_get_logger_different_names(self):
        logger1 = get_logger("module1")
        logger2 = get_logger("module2")

        assert logger1 is not logger2
        assert logger1.name == "module1"
        assert logger2.name == "module2"


@pytest.mark.unit
@pytest.mark.logging
class TestLogMessages:
    """测试 LogMessages 类"""

    def test_format_message_multiple_params(self):
        result = LogMessages.format_message(
            LogMessages.FILE_CONVERT_START,
            url="/up/image/a.jpg",
            target_type="png"
        )

        assert result == "开始文件格式转换: /up/image/a.jpg -> png"

    def test_get_structured_data(self):
        data = LogMessages.get_structured_data(directory="image", size=5)

        assert data == {"directory": "image", "size": 5}
