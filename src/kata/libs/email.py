"""メール送信サービスの窓口。"""

import logging
import re

from observability.tracing import trace_collaborator_call

logger = logging.getLogger(__name__)

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    """``local@domain.tld`` 形式の文字列なら True を返す。"""
    return isinstance(email, str) and _EMAIL_PATTERN.match(email) is not None


@trace_collaborator_call("email.send_email")
async def send_email(to: str, message: str) -> None:
    """``to`` 宛てに ``message`` を送信する。

    本文にはワンタイムコードが含まれ得るため、ログには長さだけを残す。
    """
    logger.info("メール送信: to=%s length=%d", to, len(message))
