import os
import traceback
from datetime import datetime
from typing import Optional

from .log_level import LogLevel


class Logger:
    """日志工具类，用于统一格式化输出日志"""

    # 最低日志级别的环境变量
    ENV_LOG_LEVEL = 'LOG_LEVEL'

    def __init__(self, min_level: Optional[LogLevel] = None):
        """
        初始化日志工具

        Args:
            min_level: 最低输出级别，为 None 时从 LOG_LEVEL 环境变量读取，默认 INFO
        """
        self.min_level = min_level if min_level is not None else self._level_from_env()

    def reload_level(self):
        """重新从 LOG_LEVEL 环境变量读取最低日志级别（如加载 .env 之后）"""
        self.min_level = self._level_from_env()

    def debug(self, message: str, tag: Optional[str] = None, show_timestamp: bool = False, exc_info: bool = False):
        """输出调试级别日志"""
        self._log(LogLevel.DEBUG, message, tag, show_timestamp, exc_info)

    def info(self, message: str, tag: Optional[str] = None, show_timestamp: bool = False, exc_info: bool = False):
        """输出信息级别日志"""
        self._log(LogLevel.INFO, message, tag, show_timestamp, exc_info)

    def warning(self, message: str, tag: Optional[str] = None, show_timestamp: bool = False, exc_info: bool = False):
        """输出警告级别日志"""
        self._log(LogLevel.WARNING, message, tag, show_timestamp, exc_info)

    def error(self, message: str, tag: Optional[str] = None, show_timestamp: bool = False, exc_info: bool = False):
        """输出错误级别日志"""
        self._log(LogLevel.ERROR, message, tag, show_timestamp, exc_info)

    def success(self, message: str, show_timestamp: bool = False):
        """输出成功级别日志 - 便捷方法，使用 INFO 级别和成功标签"""
        self.info(message=message, tag="成功", show_timestamp=show_timestamp)

    def is_enabled(self, level: LogLevel) -> bool:
        """判断指定级别的日志是否会被输出"""
        return level.priority >= self.min_level.priority

    def print_banner(self, title: str, width: int = 60, show_timestamp: bool = False):
        """打印横幅样式的内容

        Args:
            title: 横幅标题
            width: 横幅宽度
            show_timestamp: 是否显示时间戳
        """
        border = '=' * width

        if show_timestamp:
            self._print(f"[{self._timestamp()}]")

        self._print(border)
        self._print(title)
        self._print(border)

    def print_multiline(self, messages: list[str], indent: int = 0):
        """打印多行消息

        Args:
            messages: 消息列表
            indent: 每行前的缩进空格数
        """
        prefix = ' ' * indent
        for message in messages:
            self._print(f'{prefix}{message}')

    def _log(self, level: LogLevel, message: str, tag: Optional[str], show_timestamp: bool, exc_info: bool):
        """按级别过滤后输出日志，exc_info 为 True 时附带当前异常堆栈"""
        if not self.is_enabled(level):
            return

        self._print(self._format_message(level, message, tag, show_timestamp))

        if exc_info:
            stack = traceback.format_exc()
            # 不在异常处理上下文中时 format_exc 返回 "NoneType: None"
            if not stack.startswith('NoneType: None'):
                self._print(stack.rstrip())

    def _level_from_env(self) -> LogLevel:
        return LogLevel.from_name(os.getenv(self.ENV_LOG_LEVEL), default=LogLevel.INFO)

    def _print(self, message: str):
        """封装日志输出函数，便于未来统一替换日志基底"""
        print(message)

    def _timestamp(self) -> str:
        """获取格式化的时间戳"""
        return datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    def _format_message(
        self,
        level: LogLevel,
        message: str,
        tag: Optional[str] = None,
        show_timestamp: bool = False,
    ) -> str:
        """格式化日志消息

        Args:
            level: 日志级别
            message: 日志消息
            tag: 可选的自定义标签，未提供时使用级别标签
            show_timestamp: 是否显示时间戳

        Returns:
            格式化后的日志字符串
        """
        message_parts = []

        if show_timestamp:
            message_parts.append(f'[{self._timestamp()}]')

        display_tag = tag if tag else level.get_tag()
        message_parts.append(f'[{display_tag}]')
        message_parts.append(message)

        return ' '.join(message_parts)
