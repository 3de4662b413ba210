"""SMTP email adapter for the order summary receiver."""

import smtplib
from email.message import EmailMessage
from uuid import uuid4

from notifications.channel.email_port import EmailPort


class SmtpEmailAdapter(EmailPort):
    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: str = "",
        password: str = "",
        timeout: float = 5.0,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.timeout = timeout

    def send(self, to: str, subject: str, body: str) -> dict:
        message_id = f"<{uuid4().hex}@{self.host}>"
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = message_id
        message.set_content(body)

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                smtp.starttls()
                if self.username:
                    smtp.login(self.username, self.password)
                smtp.send_message(message)
        except (OSError, smtplib.SMTPException) as exc:
            return {"message_id": None, "status": "failed", "error": str(exc)}

        return {"message_id": message_id, "status": "sent"}
