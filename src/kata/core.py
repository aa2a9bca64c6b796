"""テスト対象となる純粋関数のユーティリティ集。

外部協調者に依存しない関数だけを置く。アサーションの書き方・境界値テスト・
パラメータ化テストの題材として使う。

協調者（``kata.libs``）を import してはならない。``ci/policy_check.py`` が検査する。
"""

import asyncio
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, NoReturn

from kata.errors import FetchError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# 定数
# ---------------------------------------------------------------------------

USERNAME_INPUT_MIN_LENGTH = 3
USERNAME_INPUT_MAX_LENGTH = 255
MIN_AGE = 18
MAX_AGE = 100

USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 15

# 国コード -> 運転可能な最低年齢
LEGAL_DRIVING_AGE: dict[str, int] = {
    "US": 16,
    "UK": 17,
}

FETCH_DELAY_SECONDS = 0.01


# ---------------------------------------------------------------------------
# データクラス
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Coupon:
    """割引クーポン。

    不変条件 (Invariant):
        - ``code`` は空文字列ではないこと
        - ``discount`` は 0 より大きく 1 未満であること

    Raises:
        AssertionError: 不変条件に違反した場合。
    """

    code: str
    discount: float

    def __post_init__(self) -> None:
        assert self.code, "code must not be empty"
        assert 0.0 < self.discount < 1.0, (
            f"discount must be in (0, 1), got {self.discount}"
        )


# ---------------------------------------------------------------------------
# 基本の関数
# ---------------------------------------------------------------------------


def max_of(a: float, b: float) -> float:
    """大きい方の値を返す。等しい場合は ``b`` を返す。"""
    return a if a > b else b


def fizz_buzz(n: int) -> str:
    """FizzBuzz の判定結果を返す。

    Returns:
        3 と 5 の両方で割り切れれば ``"FizzBuzz"``、3 なら ``"Fizz"``、
        5 なら ``"Buzz"``、それ以外は ``str(n)``。
    """
    if n % 3 == 0 and n % 5 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def calculate_average(numbers: Sequence[float]) -> float:
    """算術平均を返す。空のシーケンスには ``nan`` を返す。"""
    if not numbers:
        return math.nan
    return sum(numbers) / len(numbers)


def factorial(n: int) -> int | None:
    """``n`` の階乗を返す。

    事後条件 (Postcondition):
        - ``n >= 0`` のとき戻り値は 1 以上

    Returns:
        階乗。負の数には ``None``。
    """
    if n < 0:
        return None
    if n in (0, 1):
        return 1
    previous = factorial(n - 1)
    assert previous is not None, f"postcondition failed: factorial({n - 1}) is None"
    return n * previous


# ---------------------------------------------------------------------------
# 入力検証
# ---------------------------------------------------------------------------


def get_coupons() -> list[Coupon]:
    """利用可能なクーポンの一覧を返す。常に 1 件以上。"""
    return [
        Coupon(code="SAVE20NOW", discount=0.2),
        Coupon(code="DISCOUNT50OFF", discount=0.5),
    ]


def validate_user_input(username: Any, age: Any) -> str:
    """ユーザー登録フォームの入力を検証する。

    - ``username`` は 3 文字以上 255 文字以下の文字列
    - ``age`` は 18 以上 100 以下の数値（``bool`` は数値とみなさない）

    Returns:
        すべて有効なら ``"Validation successful"``。
        そうでなければ ``"Invalid username"`` / ``"Invalid age"`` をカンマで連結した文字列。
    """
    errors: list[str] = []

    if (
        not isinstance(username, str)
        or not USERNAME_INPUT_MIN_LENGTH <= len(username) <= USERNAME_INPUT_MAX_LENGTH
    ):
        errors.append("Invalid username")

    if (
        isinstance(age, bool)
        or not isinstance(age, (int, float))
        or not MIN_AGE <= age <= MAX_AGE
    ):
        errors.append("Invalid age")

    if errors:
        logger.debug("入力検証エラー: %s", errors)
        return ", ".join(errors)
    return "Validation successful"


def is_valid_username(username: Any) -> bool:
    """ユーザー名が 5 文字以上 15 文字以下の文字列なら True を返す。"""
    if not isinstance(username, str):
        return False
    return USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH


def can_drive(age: int, country_code: str) -> bool | str:
    """指定国で運転できる年齢か判定する。

    Returns:
        判定結果。未知の国コードには ``"Invalid country code"``。
    """
    legal_age = LEGAL_DRIVING_AGE.get(country_code)
    if legal_age is None:
        return "Invalid country code"
    return age >= legal_age


def is_price_in_range(price: float, min_price: float, max_price: float) -> bool:
    return min_price <= price <= max_price


# ---------------------------------------------------------------------------
# 非同期関数
# ---------------------------------------------------------------------------


async def fetch_data() -> list[int]:
    """少し待ってから数値のリストを返す。"""
    await asyncio.sleep(FETCH_DELAY_SECONDS)
    return [1, 2, 3]


async def failed_fetch_data() -> NoReturn:
    """常に失敗するデータ取得。

    Raises:
        FetchError: 常に送出する。``reason`` は ``"Operation failed"``。
    """
    await asyncio.sleep(FETCH_DELAY_SECONDS)
    raise FetchError("Operation failed")
