"""OpenTelemetry による計装モジュール。

``kata`` のビジネス操作と外部協調者の呼び出しにスパンを付与する。

OTel SDK がインストールされていない場合、全デコレータはパススルー（no-op）
として動作し、既存コードに影響を与えない。

デコレータ:
    trace_operation:         ビジネス操作のトレース
    trace_collaborator_call: 外部協調者呼び出しのトレース

どちらも同期関数とコルーチン関数の両方に適用できる。
"""

import functools
import inspect
import logging
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# 型変数（ParamSpec + TypeVar で mypy strict / Pylance 互換）
# ---------------------------------------------------------------------------

P = ParamSpec("P")
R = TypeVar("R")

SERVICE_NAME = "kata"
_TRACER_NAME = "kata.observability"

# ---------------------------------------------------------------------------
# OTel SDK のオプショナルインポート
# ---------------------------------------------------------------------------

_HAS_OTEL = False

try:
    from opentelemetry import trace
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import (
        BatchSpanProcessor,
        ConsoleSpanExporter,
    )

    _HAS_OTEL = True
except ImportError:
    pass


# ---------------------------------------------------------------------------
# TracerProvider 初期化
# ---------------------------------------------------------------------------


def init_tracer(
    service_name: str = SERVICE_NAME,
    *,
    enable_console_export: bool = False,
) -> bool:
    """TracerProvider を初期化する。

    OTel SDK がインストールされていない場合は何もしない。
    現状はコンソール出力（``enable_console_export=True`` 時）のみ対応。

    Args:
        service_name: サービス名（リソース属性に設定）。
        enable_console_export: True の場合、コンソールへもスパンを出力する。

    Returns:
        TracerProvider を設定した場合は True。
    """
    if not _HAS_OTEL:
        logger.info("OpenTelemetry SDK 未インストールのためトレーシング無効")
        return False

    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)

    if enable_console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    logger.info("TracerProvider 初期化完了: service=%s", service_name)
    return True


def get_tracer() -> Any:
    """トレーサーのインスタンスを取得する。

    OTel SDK 未導入時は ``None`` を返す。

    Returns:
        trace.Tracer または None。
    """
    if not _HAS_OTEL:
        return None
    return trace.get_tracer(_TRACER_NAME)


# ---------------------------------------------------------------------------
# 共通ラッパー
# ---------------------------------------------------------------------------


def _wrap(
    func: Callable[P, R],
    span_name: str,
    attributes: dict[str, str],
    status_key: str,
) -> Callable[P, R]:
    """``func`` の呼び出しをスパンで囲むラッパーを返す。

    スパンは呼び出しのたびに取得したトレーサーで開始するため、
    デコレート後に ``init_tracer`` を呼んでも計装が有効になる。
    例外発生時は ``status_key=error`` を記録し、例外を再送出する。
    """
    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
            with get_tracer().start_as_current_span(
                span_name, attributes=attributes
            ) as span:
                try:
                    result = await func(*args, **kwargs)  # type: ignore[misc]
                    span.set_attribute(status_key, "success")
                    return result
                except Exception as exc:
                    span.set_attribute(status_key, "error")
                    span.record_exception(exc)
                    raise

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        with get_tracer().start_as_current_span(
            span_name, attributes=attributes
        ) as span:
            try:
                result = func(*args, **kwargs)
                span.set_attribute(status_key, "success")
                return result
            except Exception as exc:
                span.set_attribute(status_key, "error")
                span.record_exception(exc)
                raise

    return wrapper


# ---------------------------------------------------------------------------
# デコレータ: ビジネス操作
# ---------------------------------------------------------------------------


def trace_operation(
    operation_name: str | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """ビジネス操作をトレースするデコレータ。

    記録する属性:
        - kata.operation: 操作名
        - kata.status: 実行結果（"success" / "error"）

    Args:
        operation_name: スパン名。省略時は関数の修飾名を使用する。

    使用方法::

        @trace_operation("order.submit")
        async def submit_order(order: Order, credit_card: CreditCard) -> dict[str, Any]:
            ...
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        if not _HAS_OTEL:
            return func

        name = operation_name or func.__qualname__
        return _wrap(
            func,
            name,
            {"kata.operation": name, "service.name": SERVICE_NAME},
            "kata.status",
        )

    return decorator


# ---------------------------------------------------------------------------
# デコレータ: 外部協調者の呼び出し
# ---------------------------------------------------------------------------


def trace_collaborator_call(
    collaborator_name: str | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """外部協調者（通貨・配送・決済・メールなど）の呼び出しをトレースするデコレータ。

    記録する属性:
        - collaborator.name: 協調者名
        - collaborator.status: 実行結果（"success" / "error"）
        - 入力パラメータは記録しない（カード番号・メールアドレスを含むため）

    Args:
        collaborator_name: スパン名。省略時は関数の修飾名を使用する。
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        if not _HAS_OTEL:
            return func

        name = collaborator_name or func.__qualname__
        return _wrap(
            func,
            f"collaborator.{name}",
            {"collaborator.name": name, "service.name": SERVICE_NAME},
            "collaborator.status",
        )

    return decorator
