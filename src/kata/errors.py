"""プロジェクト共通の例外定義。"""


class KataError(Exception):
    """すべてのプロジェクト例外の基底クラス。"""


class EmptyStackError(KataError, IndexError):
    """空のスタックに対して ``pop`` / ``peek`` を呼び出した場合に送出される。

    ``IndexError`` も継承するため、``list.pop()`` と同じ感覚で捕捉できる。
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"cannot {operation}: stack is empty")
        self.operation = operation


class FetchError(KataError):
    """データ取得に失敗した場合に送出される。

    Attributes:
        reason: 失敗理由の説明。
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class CollaboratorUnavailableError(KataError):
    """外部協調者のバックエンドが構成されていない場合に送出される。"""

    def __init__(self, collaborator: str) -> None:
        super().__init__(f"{collaborator} backend is not configured")
        self.collaborator = collaborator


class ConfigError(KataError):
    """環境変数の設定値が不正な場合に送出される。"""
