"""``Stack`` の例示テスト。

各操作の振る舞いを具体的なシナリオで検証する。
前提条件をテスト名に含め、1 テスト 1 振る舞いを原則とする。
"""

import pytest

from kata.errors import EmptyStackError, KataError
from kata.stack import Stack


@pytest.fixture
def stack() -> Stack[int]:
    """テストごとに新しい空のスタックを用意する。"""
    return Stack()


class TestPush:
    def test_push_adds_an_item(self, stack: Stack[int]) -> None:
        stack.push(1)

        assert stack.size() == 1

    def test_push_accepts_any_value(self) -> None:
        """要素の型は問わず、値はそのまま保持されること。"""
        mixed: Stack[object] = Stack()
        marker = object()
        mixed.push(None)
        mixed.push("text")
        mixed.push(marker)

        assert mixed.pop() is marker
        assert mixed.pop() == "text"
        assert mixed.pop() is None


class TestPop:
    def test_pop_returns_and_removes_the_top_item(self, stack: Stack[int]) -> None:
        stack.push(1)
        stack.push(2)

        popped = stack.pop()

        assert popped == 2
        assert stack.size() == 1

    def test_pop_on_empty_stack_raises(self, stack: Stack[int]) -> None:
        # 呼び出しを pytest.raises のブロック内に置くこと
        with pytest.raises(EmptyStackError, match=r"(?i)empty"):
            stack.pop()

    def test_pop_after_clear_raises(self, stack: Stack[int]) -> None:
        stack.push(1)
        stack.clear()

        with pytest.raises(EmptyStackError, match=r"(?i)empty"):
            stack.pop()


class TestPeek:
    def test_peek_returns_the_top_item_without_removing_it(
        self, stack: Stack[int]
    ) -> None:
        stack.push(1)
        stack.push(2)

        top = stack.peek()

        assert top == 2
        assert stack.size() == 2

    def test_peek_on_empty_stack_raises(self, stack: Stack[int]) -> None:
        with pytest.raises(EmptyStackError, match=r"(?i)empty"):
            stack.peek()


class TestSizeAndIsEmpty:
    def test_new_stack_is_empty(self, stack: Stack[int]) -> None:
        assert stack.is_empty() is True
        assert stack.size() == 0

    def test_stack_with_an_item_is_not_empty(self, stack: Stack[int]) -> None:
        stack.push(1)

        assert stack.is_empty() is False

    def test_size_returns_the_number_of_items(self, stack: Stack[int]) -> None:
        stack.push(1)
        stack.push(2)

        assert stack.size() == 2
        assert len(stack) == 2


class TestClear:
    def test_clear_removes_all_items(self, stack: Stack[int]) -> None:
        stack.push(1)
        stack.push(2)

        stack.clear()

        assert stack.size() == 0
        assert stack.is_empty()

    def test_clear_on_empty_stack_is_a_no_op(self, stack: Stack[int]) -> None:
        stack.clear()
        stack.clear()

        assert stack.size() == 0

    def test_stack_is_reusable_after_clear(self, stack: Stack[int]) -> None:
        stack.push(1)
        stack.clear()
        stack.push(3)

        assert stack.peek() == 3


class TestEmptyStackError:
    """``EmptyStackError`` の型階層とメッセージの検証。"""

    def test_error_is_catchable_as_index_error(self, stack: Stack[int]) -> None:
        with pytest.raises(IndexError):
            stack.pop()

    def test_error_is_a_project_error(self, stack: Stack[int]) -> None:
        with pytest.raises(KataError):
            stack.peek()

    def test_error_records_the_failed_operation(self, stack: Stack[int]) -> None:
        with pytest.raises(EmptyStackError) as exc_info:
            stack.peek()

        assert exc_info.value.operation == "peek"
        assert "empty" in str(exc_info.value)


def test_repr_shows_contents(stack: Stack[int]) -> None:
    stack.push(1)
    stack.push(2)

    assert repr(stack) == "Stack([1, 2])"
