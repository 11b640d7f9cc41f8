from .mail_sender import MailSender

__all__ = ["MailSender"]
