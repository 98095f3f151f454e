import os
from dataclasses import fields, replace
from pathlib import Path
from typing import Any

import json5

from email_sender.models import DEFAULT_HOST, EmailSenderOptions
from tools.logger import logger


class OptionsBindingError(ValueError):
	"""配置值无法绑定到 EmailSenderOptions 时抛出"""

	def __init__(self, message: str, key: str | None = None):
		"""
		初始化绑定异常

		Args:
			message: 错误描述
			key: 出错的配置键（可选）
		"""
		super().__init__(message)
		self.key = key


class EmailSenderOptionsLoader:
	"""
	邮件发送配置加载器

	按以下顺序逐层覆盖（后者优先）：
	1. EmailSenderOptions 默认值
	2. 配置文件中的指定节点（JSON5）
	3. EMAIL_SENDER_OPTIONS 环境变量（JSON5 对象）
	4. EMAIL_SENDER_OPTIONS__<字段> 单字段环境变量
	"""

	class Env:
		"""环境变量配置"""

		OPTIONS_KEY = 'EMAIL_SENDER_OPTIONS'
		FIELD_PREFIX = 'EMAIL_SENDER_OPTIONS__'
		SETTINGS_FILE_KEY = 'EMAIL_SENDER_SETTINGS_FILE'

	# 配置文件中的默认节点名称
	DEFAULT_SECTION = 'EmailSenderOptions'

	def __init__(self, settings_file: str | Path | None = None, section: str = DEFAULT_SECTION):
		"""
		初始化配置加载器

		Args:
			settings_file: 配置文件路径，为 None 时读取 EMAIL_SENDER_SETTINGS_FILE 环境变量
			section: 配置文件中的节点名称，空字符串表示使用整个文件
		"""
		self.settings_file = Path(settings_file) if settings_file else None
		self.section = section

		# 字段名归一化映射：enablessl -> enable_ssl
		self._field_map = {self._normalize_key(f.name): f.name for f in fields(EmailSenderOptions)}

	def load(self) -> EmailSenderOptions:
		"""
		加载邮件发送配置

		Returns:
			逐层绑定后的 EmailSenderOptions

		Raises:
			OptionsBindingError: 配置文件无法解析或配置值类型无法转换时抛出
		"""
		options = EmailSenderOptions()

		file_values = self._load_settings_file()
		if file_values:
			options = self.bind(options, file_values)
			logger.debug('已应用配置文件中的邮件发送配置', tag='配置')

		env_values = self._load_env_options()
		if env_values:
			options = self.bind(options, env_values)
			logger.debug(f'已应用 {self.Env.OPTIONS_KEY} 环境变量', tag='配置')

		field_values = self._load_env_fields()
		if field_values:
			options = self.bind(options, field_values)
			logger.debug(f'已应用 {len(field_values)} 个单字段环境变量', tag='配置')

		if options.host == DEFAULT_HOST:
			logger.warning(f'SMTP 服务器地址为默认占位值 {DEFAULT_HOST}，生产环境请显式配置')

		return options

	def bind(self, options: EmailSenderOptions, values: dict[str, Any]) -> EmailSenderOptions:
		"""
		将一层配置绑定到现有配置上，返回新的配置对象

		Args:
			options: 当前配置
			values: 待绑定的配置字典，值为 None 的键保持原值

		Returns:
			绑定后的新配置对象

		Raises:
			OptionsBindingError: 配置值类型无法转换时抛出
		"""
		changes = {}

		for raw_key, value in values.items():
			field_name = self._field_map.get(self._normalize_key(str(raw_key)))
			if field_name is None:
				logger.warning(f'未知的邮件发送配置项：{raw_key}，将被忽略')
				continue

			# null 不覆盖下层配置
			if value is None:
				continue

			changes[field_name] = self._convert(field_name, raw_key, value)

		return replace(options, **changes)

	def _convert(self, field_name: str, raw_key: str, value: Any) -> Any:
		"""
		将配置值转换为字段对应的类型

		Args:
			field_name: 字段名
			raw_key: 原始配置键，用于错误信息
			value: 原始配置值

		Returns:
			转换后的值
		"""
		if field_name == 'port':
			return self._to_int(raw_key, value)

		if field_name == 'enable_ssl':
			return self._to_bool(raw_key, value)

		# host / user / key 均为字符串
		if isinstance(value, str):
			return value
		if isinstance(value, (int, float)) and not isinstance(value, bool):
			return str(value)

		raise OptionsBindingError(f'配置项 {raw_key} 必须是字符串，实际为 {type(value).__name__}', key=raw_key)

	def _to_int(self, raw_key: str, value: Any) -> int:
		"""转换整数配置值"""
		if isinstance(value, bool):
			raise OptionsBindingError(f'配置项 {raw_key} 必须是整数，实际为布尔值', key=raw_key)

		if isinstance(value, int):
			return value

		# 只接受 ASCII 十进制整数，不接受 "4_65" 或全角数字
		if isinstance(value, str):
			digits = value.strip()
			if digits.isascii() and digits.removeprefix('-').isdigit():
				return int(digits)

		raise OptionsBindingError(f'配置项 {raw_key} 的值 {value!r} 无法转换为整数', key=raw_key)

	def _to_bool(self, raw_key: str, value: Any) -> bool:
		"""转换布尔配置值，只接受 true / false"""
		if isinstance(value, bool):
			return value

		if isinstance(value, str):
			normalized = value.strip().lower()
			if normalized == 'true':
				return True
			if normalized == 'false':
				return False

		raise OptionsBindingError(f'配置项 {raw_key} 的值 {value!r} 无法转换为布尔值', key=raw_key)

	def _load_settings_file(self) -> dict[str, Any] | None:
		"""
		加载配置文件中的邮件发送配置节点

		Returns:
			节点内容，文件或节点不存在时返回 None
		"""
		config_file = self.settings_file
		explicit = config_file is not None

		if config_file is None:
			env_path = os.getenv(self.Env.SETTINGS_FILE_KEY, '').strip()
			if not env_path:
				return None
			config_file = Path(env_path)

		if not config_file.exists():
			if explicit:
				raise OptionsBindingError(f'配置文件不存在：{config_file}')
			logger.warning(f'配置文件 {config_file} 不存在，跳过')
			return None

		try:
			with open(config_file, 'r', encoding='utf-8') as f:
				data = json5.load(f)
		except OSError as e:
			raise OptionsBindingError(f'配置文件 {config_file} 读取失败：{e}') from e
		except ValueError as e:
			raise OptionsBindingError(f'配置文件 {config_file} 解析失败：{e}') from e

		if not isinstance(data, dict):
			raise OptionsBindingError(f'配置文件 {config_file} 必须是对象格式')

		if not self.section:
			return data

		section = self._find_section(data)
		if section is None:
			logger.debug(f'配置文件中没有 {self.section} 节点', tag='配置')
			return None

		if not isinstance(section, dict):
			raise OptionsBindingError(f'配置节点 {self.section} 必须是对象格式', key=self.section)

		return section

	def _find_section(self, data: dict[str, Any]) -> Any:
		"""按归一化后的名称查找配置节点"""
		target = self._normalize_key(self.section)
		for key, value in data.items():
			if self._normalize_key(str(key)) == target:
				return value
		return None

	def _load_env_options(self) -> dict[str, Any] | None:
		"""加载 EMAIL_SENDER_OPTIONS 环境变量"""
		env_value = os.getenv(self.Env.OPTIONS_KEY, '').strip()
		if not env_value:
			return None

		try:
			parsed = json5.loads(env_value)
		except ValueError as e:
			raise OptionsBindingError(f'{self.Env.OPTIONS_KEY} 中的 JSON 格式无效：{e}', key=self.Env.OPTIONS_KEY) from e

		if not isinstance(parsed, dict):
			raise OptionsBindingError(f'{self.Env.OPTIONS_KEY} 必须使用对象格式 {{}}', key=self.Env.OPTIONS_KEY)

		return parsed

	def _load_env_fields(self) -> dict[str, str]:
		"""加载 EMAIL_SENDER_OPTIONS__<字段> 形式的单字段环境变量"""
		prefix = self.Env.FIELD_PREFIX
		return {
			key[len(prefix):]: value
			for key, value in os.environ.items()
			if key.upper().startswith(prefix) and len(key) > len(prefix)
		}

	@staticmethod
	def _normalize_key(key: str) -> str:
		"""忽略大小写、下划线和连字符"""
		return key.replace('_', '').replace('-', '').lower()


def load_email_sender_options(
	settings_file: str | Path | None = None,
	section: str = EmailSenderOptionsLoader.DEFAULT_SECTION,
) -> EmailSenderOptions:
	"""
	加载邮件发送配置的便捷函数

	Args:
		settings_file: 配置文件路径（可选）
		section: 配置文件中的节点名称

	Returns:
		EmailSenderOptions 实例
	"""
	return EmailSenderOptionsLoader(settings_file=settings_file, section=section).load()
