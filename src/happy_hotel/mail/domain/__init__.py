from .service import MailSender

__all__ = ["MailSender"]
