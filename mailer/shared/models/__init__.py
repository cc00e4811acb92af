from .email import Creds, EmailRequest, EmailResponse
