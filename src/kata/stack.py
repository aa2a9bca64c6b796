"""契約付きの LIFO スタック。

このモジュールは Design by Contract の記述パターンをデータ構造に適用した例である:

1. **不変条件**: 要素数は常に 0 以上で、保持している要素数と一致する
2. **事前条件**: ``pop`` / ``peek`` はスタックが空でないこと
3. **事後条件**: ``push`` / ``pop`` の前後で要素数が 1 だけ変化する

事前条件違反は ``AssertionError`` ではなく ``EmptyStackError`` で通知する。
空のスタックへの ``pop`` は呼び出し側が回復できる正常な失敗経路だからである。
"""

import logging
from typing import Generic, TypeVar

from kata.errors import EmptyStackError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Stack(Generic[T]):
    """後入れ先出し（LIFO）のコンテナ。

    要素の型は問わず、格納した値を検査・複製しない。
    スレッドセーフではないため、並行アクセスは呼び出し側で直列化すること。

    不変条件 (Invariant):
        - ``size()`` は 0 以上の整数で、保持している要素数と等しい
        - ``peek()`` / ``pop()`` が返すのは、残っている要素のうち最後に push されたもの
        - ``is_empty()`` は ``size() == 0`` のときに限り True

    Example::

        stack: Stack[int] = Stack()
        stack.push(1)
        stack.push(2)
        stack.pop()   # -> 2
        stack.size()  # -> 1
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """``item`` を新しい先頭要素として追加する。

        事後条件 (Postcondition):
            - 要素数が 1 増える
            - ``peek()`` は ``item`` を返す

        Args:
            item: 追加する値。任意の型を受け付ける。
        """
        before = len(self._items)
        self._items.append(item)

        assert len(self._items) == before + 1, "postcondition failed: size did not grow"

    def pop(self) -> T:
        """先頭要素を取り除いて返す。

        事前条件 (Precondition):
            - スタックが空でないこと

        事後条件 (Postcondition):
            - 要素数が 1 減る

        Returns:
            取り除いた先頭要素。

        Raises:
            EmptyStackError: スタックが空の場合。
        """
        if not self._items:
            raise EmptyStackError("pop")
        return self._items.pop()

    def peek(self) -> T:
        """先頭要素を取り除かずに返す。

        Returns:
            現在の先頭要素。

        Raises:
            EmptyStackError: スタックが空の場合。
        """
        if not self._items:
            raise EmptyStackError("peek")
        return self._items[-1]

    def size(self) -> int:
        """保持している要素数を返す。空のときは 0。"""
        return len(self._items)

    def is_empty(self) -> bool:
        """要素を 1 つも保持していなければ True を返す。"""
        return not self._items

    def clear(self) -> None:
        """すべての要素を取り除く。空のスタックに対しては何もしない（冪等）。"""
        if self._items:
            logger.debug("Stack をクリア: %d 要素を破棄", len(self._items))
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
