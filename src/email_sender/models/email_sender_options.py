from dataclasses import dataclass, field

# 默认 SMTP 服务器（QQ 邮箱），仅作为占位值，生产环境请显式配置
DEFAULT_HOST = 'smtp.qq.com'


@dataclass
class EmailSenderOptions:
	"""SMTP 邮件发送配置参数类"""

	# SMTP 服务器地址
	host: str = DEFAULT_HOST

	# SMTP 登录用户（通常是邮箱地址）
	user: str = ''

	# SMTP 登录密码或授权码
	key: str = field(default='', repr=False)

	# SMTP 端口，未配置时为 0
	port: int = 0

	# 是否启用 SSL 加密传输
	enable_ssl: bool = False
