import hashlib
import os

from email_sender.models import EmailSenderOptions


class PrivacyHandler:
	"""隐私保护处理器，负责邮件发送配置在日志中的脱敏展示"""

	# 环境变量名
	ENV_SHOW_SENSITIVE_INFO = 'SHOW_SENSITIVE_INFO'

	# 未设置字段的展示文本
	UNSET_DISPLAY = '(未设置)'

	# 密钥脱敏后的展示文本
	MASKED_KEY = '******'

	def __init__(self, show_sensitive_info: bool):
		"""初始化隐私保护处理器

		Args:
			show_sensitive_info: 是否显示敏感信息
		"""
		self.show_sensitive_info = show_sensitive_info

	@staticmethod
	def should_show_sensitive_info() -> bool:
		"""判断是否应该显示敏感信息

		只有 SHOW_SENSITIVE_INFO 显式设置为 true 时才显示，默认脱敏

		Returns:
			是否应该显示敏感信息
		"""
		manual_config = os.getenv(PrivacyHandler.ENV_SHOW_SENSITIVE_INFO, '')
		return manual_config.strip().lower() == 'true'

	def get_safe_user(self, user: str) -> str:
		"""获取安全的登录用户展示（根据隐私设置）

		Args:
			user: SMTP 登录用户

		Returns:
			脱敏时返回 "首字符 + hash 前 4 位"，否则返回原始用户
		"""
		if not user:
			return self.UNSET_DISPLAY

		if self.show_sensitive_info:
			return user

		user_hash = hashlib.sha256(user.encode('utf-8')).hexdigest()[:4]
		return f'{user[0]}{user_hash}'

	def get_safe_key(self, key: str) -> str:
		"""获取安全的密钥展示（根据隐私设置）

		Args:
			key: SMTP 登录密码或授权码

		Returns:
			脱敏时返回固定掩码，否则返回原始密钥
		"""
		if not key:
			return self.UNSET_DISPLAY

		if self.show_sensitive_info:
			return key

		return self.MASKED_KEY

	def describe(self, options: EmailSenderOptions) -> list[str]:
		"""生成配置的逐行展示文本

		Args:
			options: 邮件发送配置

		Returns:
			每个字段一行的展示文本列表
		"""
		return [
			f'host: {options.host or self.UNSET_DISPLAY}',
			f'user: {self.get_safe_user(options.user)}',
			f'key: {self.get_safe_key(options.key)}',
			f'port: {options.port}',
			f'enableSsl: {str(options.enable_ssl).lower()}',
		]
