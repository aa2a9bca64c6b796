"""決済サービスの窓口。"""

import logging
from dataclasses import dataclass
from typing import Any

from kata.errors import CollaboratorUnavailableError
from observability.tracing import trace_collaborator_call

logger = logging.getLogger(__name__)

PAYMENT_SUCCESS = "success"
PAYMENT_FAILED = "failed"


@dataclass(frozen=True)
class PaymentResult:
    """決済結果。``status`` は ``"success"`` または ``"failed"``。"""

    status: str


@trace_collaborator_call("payment.charge")
async def charge(credit_card: Any, amount: float) -> PaymentResult:
    """クレジットカードに ``amount`` を請求する。

    Raises:
        CollaboratorUnavailableError: 決済先が構成されていない場合。
    """
    # カード情報はログに残さない
    logger.debug("決済要求: amount=%s", amount)
    raise CollaboratorUnavailableError("payment")
