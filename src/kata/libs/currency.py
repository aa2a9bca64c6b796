"""為替レートサービスの窓口。"""

import logging

from kata.errors import CollaboratorUnavailableError
from observability.tracing import trace_collaborator_call

logger = logging.getLogger(__name__)


@trace_collaborator_call("currency.get_exchange_rate")
def get_exchange_rate(from_currency: str, to_currency: str) -> float:
    """``from_currency`` から ``to_currency`` への為替レートを返す。

    Raises:
        CollaboratorUnavailableError: レート取得先が構成されていない場合。
    """
    logger.debug("為替レート要求: %s -> %s", from_currency, to_currency)
    raise CollaboratorUnavailableError("currency")
