"""``ci/policy_check.py`` のテスト。

一時ディレクトリに最小のリポジトリ構成を作り、各ポリシーの検出を検証する。
検出対象の文字列はこのファイル自体が違反にならないよう分割して組み立てる。
"""

from pathlib import Path

import pytest

import policy_check


def _write(root: Path, rel: str, text: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    _write(tmp_path, "src/kata/stack.py", "import logging\n")
    _write(tmp_path, "src/kata/core.py", "import asyncio\n")
    _write(tmp_path, "src/kata/mocking.py", "from kata.libs import currency\n")
    return tmp_path


class TestPureModules:
    def test_clean_repository_passes(self, repo: Path) -> None:
        assert policy_check.collect_issues(repo) == []

    @pytest.mark.parametrize(
        "line",
        [
            "from kata.libs import currency\n",
            "from kata.libs.payment import charge\n",
            "import kata.libs.email\n",
            "from kata import libs\n",
            "from kata.mocking import login\n",
        ],
    )
    def test_core_must_not_import_collaborators(self, repo: Path, line: str) -> None:
        _write(repo, "src/kata/core.py", line)

        issues = policy_check.collect_issues(repo)

        assert len(issues) == 1
        assert "src/kata/core.py" in issues[0]

    def test_mocking_may_import_collaborators(self, repo: Path) -> None:
        assert not any("mocking.py" in issue for issue in policy_check.collect_issues(repo))


class TestSecretsAndUrls:
    def test_detects_access_keys(self, repo: Path) -> None:
        _write(repo, "tests/test_x.py", "KEY = '" + "AKIA" + "A" * 16 + "'\n")

        issues = policy_check.collect_issues(repo)

        assert any("秘密情報" in issue for issue in issues)

    def test_detects_card_numbers(self, repo: Path) -> None:
        _write(repo, "tests/test_x.py", "CARD = " + "4" + "1" * 15 + "\n")

        assert any("秘密情報" in issue for issue in policy_check.collect_issues(repo))

    def test_detects_hard_coded_urls(self, repo: Path) -> None:
        _write(repo, "src/kata/client.py", "URL = 'http" + "://internal.invalid/api'\n")

        issues = policy_check.collect_issues(repo)

        assert issues == ["外部接続疑い: URL直書き検出 in src/kata/client.py:1"]

    def test_allowlisted_urls_and_comments_pass(self, repo: Path) -> None:
        _write(
            repo,
            "src/kata/client.py",
            "# see http" + "://internal.invalid\nURL = 'https" + "://example.com'\n",
        )

        assert policy_check.collect_issues(repo) == []


class TestMain:
    def test_returns_non_zero_on_violation(
        self, repo: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _write(repo, "src/kata/stack.py", "from kata.libs import email\n")

        assert policy_check.main(repo) == 1
        assert "FAILED" in capsys.readouterr().out

    def test_returns_zero_when_clean(
        self, repo: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert policy_check.main(repo) == 0
        assert "OK" in capsys.readouterr().out

    def test_this_repository_passes(self) -> None:
        assert policy_check.collect_issues() == []
