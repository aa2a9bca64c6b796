"""認証用ワンタイムコードの発行。"""

import logging
import secrets

from observability.tracing import trace_collaborator_call

logger = logging.getLogger(__name__)

CODE_LOWER_BOUND = 100_000
CODE_UPPER_BOUND = 1_000_000


@trace_collaborator_call("security.generate_code")
def generate_code() -> int:
    """6 桁のワンタイムコードを返す。

    事後条件 (Postcondition):
        - ``CODE_LOWER_BOUND <= 戻り値 < CODE_UPPER_BOUND``（常に 6 桁）
    """
    code = CODE_LOWER_BOUND + secrets.randbelow(CODE_UPPER_BOUND - CODE_LOWER_BOUND)

    assert CODE_LOWER_BOUND <= code < CODE_UPPER_BOUND, f"postcondition failed: code={code}"

    logger.debug("ワンタイムコードを発行")
    return code
