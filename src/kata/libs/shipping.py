"""配送見積もりサービスの窓口。"""

import logging
from dataclasses import dataclass

from kata.errors import CollaboratorUnavailableError
from observability.tracing import trace_collaborator_call

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShippingQuote:
    """配送見積もり。

    Attributes:
        cost: 送料（USD）。
        estimated_days: 到着までの見込み日数。
    """

    cost: float
    estimated_days: int


@trace_collaborator_call("shipping.get_shipping_quote")
def get_shipping_quote(destination: str) -> ShippingQuote | None:
    """``destination`` への配送見積もりを返す。配送不可なら ``None``。

    Raises:
        CollaboratorUnavailableError: 見積もり先が構成されていない場合。
    """
    logger.debug("配送見積もり要求: destination=%s", destination)
    raise CollaboratorUnavailableError("shipping")
