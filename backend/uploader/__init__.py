"""
文件上传服务
"""

__version__ = "1.0.0"
