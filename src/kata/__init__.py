"""テスト技法を学ぶための小さなユーティリティ集。

- ``kata.stack``: 契約付きの LIFO スタック
- ``kata.core``: 純粋関数のユーティリティ
- ``kata.mocking``: 外部協調者に依存するビジネスロジック
"""

from kata.errors import (
    CollaboratorUnavailableError,
    ConfigError,
    EmptyStackError,
    FetchError,
    KataError,
)
from kata.stack import Stack

__all__ = [
    "CollaboratorUnavailableError",
    "ConfigError",
    "EmptyStackError",
    "FetchError",
    "KataError",
    "Stack",
]
