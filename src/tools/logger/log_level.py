from enum import Enum


class LogLevel(Enum):
	"""日志级别枚举，按严重程度递增"""

	DEBUG = ('DEBUG', '调试', 10)
	INFO = ('INFO', '信息', 20)
	WARNING = ('WARNING', '警告', 30)
	ERROR = ('ERROR', '错误', 40)

	def __init__(self, value: str, tag: str, priority: int):
		"""
		初始化日志级别枚举

		Args:
			value: 日志级别的字符串值
			tag: 日志级别的中文标签
			priority: 日志级别的优先级，数值越大越严重
		"""
		self._value_ = value
		self._tag = tag
		self._priority = priority

	def get_tag(self) -> str:
		"""获取日志级别对应的中文标签"""
		return self._tag

	@property
	def priority(self) -> int:
		return self._priority

	@classmethod
	def from_name(cls, name: str | None, default: 'LogLevel') -> 'LogLevel':
		"""
		根据名称解析日志级别，忽略大小写

		Args:
			name: 日志级别名称（如 "debug"）
			default: 无法识别时使用的默认级别

		Returns:
			对应的日志级别
		"""
		if not name:
			return default

		normalized = name.strip().upper()
		for level in cls:
			if level.value == normalized:
				return level
		return default
