from email_sender.models.email_sender_options import DEFAULT_HOST, EmailSenderOptions

__all__ = [
	'DEFAULT_HOST',
	'EmailSenderOptions',
]
