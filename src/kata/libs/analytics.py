"""アクセス解析サービスの窓口。"""

import logging

from observability.tracing import trace_collaborator_call

logger = logging.getLogger(__name__)


@trace_collaborator_call("analytics.track_page_view")
def track_page_view(page_path: str) -> None:
    logger.info("ページビュー記録: %s", page_path)
