from .models import DEFAULT_HOST, EmailSenderOptions
from .options_loader import EmailSenderOptionsLoader, OptionsBindingError, load_email_sender_options
from .privacy_handler import PrivacyHandler

__all__ = [
	'DEFAULT_HOST',
	'EmailSenderOptions',
	'EmailSenderOptionsLoader',
	'OptionsBindingError',
	'PrivacyHandler',
	'load_email_sender_options',
]
