from tests.fixtures.env import clean_email_sender_env, options_env_setter
from tests.fixtures.file import settings_file_factory

__all__ = [
	'clean_email_sender_env',
	'options_env_setter',
	'settings_file_factory',
]
