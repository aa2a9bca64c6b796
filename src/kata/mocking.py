"""外部協調者に依存するビジネスロジック。

モックによるテストの題材として使う。協調者は必ずモジュール属性経由
（``currency.get_exchange_rate`` など）で呼び出すこと。関数を直接 import すると
``unittest.mock.patch("kata.libs.currency.get_exchange_rate")`` が効かなくなる。

現在時刻は ``current_time()`` を通して取得する。テストではこの関数を差し替える。
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from kata.libs import analytics, currency, email, payment, security, shipping
from observability.tracing import trace_operation

logger = logging.getLogger(__name__)

BASE_CURRENCY = "USD"

# 営業時間 [開始, 終了)
OPENING_HOUR = 8
CLOSING_HOUR = 20

CHRISTMAS_DISCOUNT = 0.2
WELCOME_MESSAGE = "Welcome aboard!"


@dataclass(frozen=True)
class Order:
    total_amount: float


@dataclass(frozen=True)
class CreditCard:
    credit_card_number: int


def current_time() -> datetime:
    """現在のローカル時刻を返す。"""
    return datetime.now()


# ---------------------------------------------------------------------------
# 戻り値のスタブで検証する関数
# ---------------------------------------------------------------------------


def get_price_in_currency(price: float, target_currency: str) -> float:
    """USD 建ての ``price`` を ``target_currency`` 建てに換算する。"""
    rate = currency.get_exchange_rate(BASE_CURRENCY, target_currency)
    return price * rate


def get_shipping_info(destination: str) -> str:
    """配送料と日数の案内文を返す。見積もりがなければ配送不可の旨を返す。"""
    quote = shipping.get_shipping_quote(destination)
    if not quote:
        return "Shipping Unavailable"
    return f"Shipping Cost: ${quote.cost:g} ({quote.estimated_days} Days)"


# ---------------------------------------------------------------------------
# 呼び出しの検証（インタラクションテスト）の題材
# ---------------------------------------------------------------------------


@trace_operation("page.render")
async def render_page() -> str:
    """ホーム画面を描画し、ページビューを記録する。"""
    analytics.track_page_view("/home")
    return "<div>content</div>"


@trace_operation("order.submit")
async def submit_order(order: Order, credit_card: CreditCard) -> dict[str, Any]:
    """注文の代金を請求する。

    Returns:
        成功時は ``{"success": True}``、決済失敗時は
        ``{"success": False, "error": "payment_error"}``。
    """
    result = await payment.charge(credit_card, order.total_amount)

    if result.status == payment.PAYMENT_FAILED:
        logger.warning("決済失敗: amount=%s", order.total_amount)
        return {"success": False, "error": "payment_error"}

    return {"success": True}


@trace_operation("user.sign_up")
async def sign_up(email_address: str) -> bool:
    """会員登録し、歓迎メールを 1 通送る。メールアドレスが不正なら False。"""
    if not email.is_valid_email(email_address):
        return False

    await email.send_email(email_address, WELCOME_MESSAGE)
    return True


@trace_operation("user.login")
async def login(email_address: str) -> None:
    """ワンタイムコードを発行し、メールで送る。"""
    code = security.generate_code()
    await email.send_email(email_address, str(code))


# ---------------------------------------------------------------------------
# 時刻に依存する関数
# ---------------------------------------------------------------------------


def is_online() -> bool:
    """現在時刻が営業時間内（8 時から 20 時の手前まで）なら True を返す。"""
    hour = current_time().hour
    return OPENING_HOUR <= hour < CLOSING_HOUR


def get_discount() -> float:
    """クリスマス当日（12 月 25 日）なら 0.2、それ以外は 0 を返す。"""
    today = current_time()
    is_christmas_day = today.month == 12 and today.day == 25
    return CHRISTMAS_DISCOUNT if is_christmas_day else 0.0
