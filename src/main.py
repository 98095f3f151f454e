import sys

from dotenv import load_dotenv

from email_sender import OptionsBindingError, PrivacyHandler, load_email_sender_options
from tools.logger import logger


def run_main():
	"""加载邮件发送配置并输出脱敏后的配置摘要"""
	# 禁用变量插值以保留密钥中的 $ 符号
	load_dotenv(interpolate=False)
	logger.reload_level()

	try:
		options = load_email_sender_options()

	except OptionsBindingError as e:
		logger.error(
			message=f'邮件发送配置加载失败：{e}',
			tag='配置',
			exc_info=True,
		)
		sys.exit(1)

	privacy_handler = PrivacyHandler(PrivacyHandler.should_show_sensitive_info())

	logger.print_banner('SMTP 邮件发送配置')
	logger.print_multiline(privacy_handler.describe(options), indent=2)
	logger.success('邮件发送配置加载完成')


if __name__ == '__main__':
	run_main()
