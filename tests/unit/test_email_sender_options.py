import pytest

from email_sender.models import DEFAULT_HOST, EmailSenderOptions


class TestEmailSenderOptions:
	"""测试 EmailSenderOptions 数据模型"""

	def test_default_values(self):
		"""测试默认构造的字段值"""
		options = EmailSenderOptions()

		assert options.host == 'smtp.qq.com'
		assert options.host == DEFAULT_HOST
		assert options.user == ''
		assert options.key == ''
		assert options.port == 0
		assert options.enable_ssl is False

	@pytest.mark.parametrize(
		'field_name,value',
		[
			('host', 'smtp.example.com'),
			('user', 'alice@example.com'),
			('key', 's3cr$t'),
			('port', 587),
			('enable_ssl', True),
		],
	)
	def test_field_set_and_read_back(self, field_name: str, value):
		"""测试单个字段写入后读取到完全相同的值，且其他字段保持默认"""
		options = EmailSenderOptions()
		defaults = EmailSenderOptions()

		setattr(options, field_name, value)

		assert getattr(options, field_name) == value
		for other in ['host', 'user', 'key', 'port', 'enable_ssl']:
			if other != field_name:
				assert getattr(options, other) == getattr(defaults, other)

	def test_set_credentials_keeps_default_host(self):
		"""测试设置认证信息、端口和 SSL 后 host 保持默认值"""
		options = EmailSenderOptions()
		assert options.host == 'smtp.qq.com'

		options.user = 'alice'
		options.key = 'secret'
		options.port = 465
		options.enable_ssl = True

		assert options.user == 'alice'
		assert options.key == 'secret'
		assert options.port == 465
		assert options.enable_ssl is True
		assert options.host == 'smtp.qq.com'

	def test_no_validation_on_assignment(self):
		"""测试字段赋值不做任何校验"""
		options = EmailSenderOptions(host='', port=70000)

		assert options.host == ''
		assert options.port == 70000

		options.port = -1
		assert options.port == -1

	def test_instances_are_independent(self):
		"""测试不同实例之间互不影响"""
		first = EmailSenderOptions()
		second = EmailSenderOptions()

		first.user = 'alice'

		assert second.user == ''

	def test_repr_hides_key(self):
		"""测试 repr 中不包含密钥"""
		options = EmailSenderOptions(user='alice', key='top-secret')

		text = repr(options)

		assert 'alice' in text
		assert 'top-secret' not in text

	def test_equality(self):
		"""测试相同字段值的实例相等"""
		assert EmailSenderOptions(port=465) == EmailSenderOptions(port=465)
		assert EmailSenderOptions(port=465) != EmailSenderOptions(port=587)
