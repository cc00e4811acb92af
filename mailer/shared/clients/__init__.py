from .mailer_client import MailerClient
