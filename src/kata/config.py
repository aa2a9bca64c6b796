"""環境変数による設定とプロセス初期化。

対応する環境変数:
    KATA_LOG_LEVEL:     ログレベル（既定 ``INFO``）
    KATA_TRACE_CONSOLE: 真値（``1`` / ``true`` / ``yes`` / ``on``）でスパンをコンソール出力
    KATA_SERVICE_NAME:  トレースのサービス名（既定 ``kata``）
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from kata.errors import ConfigError
from observability.tracing import SERVICE_NAME, init_tracer

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    """実行時設定。

    不変条件 (Invariant):
        - ``log_level`` は標準 logging のレベル名であること
    """

    log_level: str = "INFO"
    trace_console: bool = False
    service_name: str = SERVICE_NAME

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """環境変数から設定を読み込む。

        Args:
            environ: 参照する環境変数。省略時は ``os.environ``。

        Raises:
            ConfigError: ``KATA_LOG_LEVEL`` が不正な場合。
        """
        env = os.environ if environ is None else environ

        log_level = env.get("KATA_LOG_LEVEL", "INFO").strip().upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigError(f"invalid KATA_LOG_LEVEL: {log_level!r}")

        return cls(
            log_level=log_level,
            trace_console=env.get("KATA_TRACE_CONSOLE", "").strip().lower() in _TRUTHY,
            service_name=env.get("KATA_SERVICE_NAME") or SERVICE_NAME,
        )


def setup(settings: Settings | None = None) -> Settings:
    """ロギングとトレーシングを初期化する。

    Returns:
        適用した設定。
    """
    settings = settings or Settings.from_env()

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    init_tracer(
        settings.service_name,
        enable_console_export=settings.trace_console,
    )
    logger.info("初期化完了: log_level=%s", settings.log_level)
    return settings
