"""リポジトリのポリシーチェッカー。

以下を検査する:
  - 純粋モジュール（``kata/stack.py`` / ``kata/core.py``）が外部協調者を import していないこと
  - 秘密情報らしき文字列がコミットされていないこと
  - コード中に外部 URL が直書きされていないこと
  - ``.env`` が git 管理されていないこと

使い方:
    python ci/policy_check.py
"""

from __future__ import annotations

import re
import subprocess
from pathlib import Path

# ---------------------------------------------------------------------------
# 設定
# ---------------------------------------------------------------------------

REPO_ROOT = Path(__file__).resolve().parent.parent

# スキャン対象ディレクトリ（REPO_ROOT からの相対パス）
SCAN_DIRS = ["src", "tests", "ci"]

SCAN_EXTENSIONS = {".py", ".toml", ".txt", ".yml", ".yaml", ".md"}

SKIP_DIR_NAMES = {
    "__pycache__",
    ".git",
    ".mypy_cache",
    ".ruff_cache",
    ".pytest_cache",
    ".hypothesis",
}

# 自分自身のパターン定義は除外
SKIP_FILES: set[str] = {
    "ci/policy_check.py",
}

# ---------------------------------------------------------------------------
# 禁止パターン
# ---------------------------------------------------------------------------

# 純粋モジュール -> 禁止 import パターン
PURE_MODULES: dict[str, list[str]] = {
    "src/kata/stack.py": [
        r"^\s*import\s+kata\.libs",
        r"^\s*from\s+kata\.libs(\.\w+)*\s+import",
        r"^\s*from\s+kata\s+import\s+.*\blibs\b",
        r"^\s*from\s+kata\.mocking\s+import",
    ],
    "src/kata/core.py": [
        r"^\s*import\s+kata\.libs",
        r"^\s*from\s+kata\.libs(\.\w+)*\s+import",
        r"^\s*from\s+kata\s+import\s+.*\blibs\b",
        r"^\s*from\s+kata\.mocking\s+import",
    ],
}

SECRET_PATTERNS: list[str] = [
    r"AKIA[0-9A-Z]{16}",  # AWS Access Key ID
    r"-----BEGIN\s+(RSA|DSA|EC|OPENSSH)\s+PRIVATE\s+KEY-----",
    r"ghp_[A-Za-z0-9_]{36,}",  # GitHub Personal Access Token
    r"sk-[A-Za-z0-9]{32,}",
    r"\b4[0-9]{12}(?:[0-9]{3})?\b",  # Visa カード番号
]

URL_PATTERN = r"https?://[^\s\"')\]>]+"

URL_ALLOWLIST_PATTERNS: list[str] = [
    r"example\.com",
    r"github\.com",
    r"pypi\.org",
    r"docs\.python\.org",
    r"opentelemetry\.io",
]


# ---------------------------------------------------------------------------
# ユーティリティ
# ---------------------------------------------------------------------------


def git_ls_files(root: Path) -> list[str]:
    """git 管理対象のファイル一覧を相対パスで取得する。git がなければ空。"""
    try:
        result = subprocess.run(
            ["git", "ls-files"],
            capture_output=True,
            text=True,
            cwd=root,
            check=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return []
    return [line for line in result.stdout.splitlines() if line.strip()]


def should_skip(path: Path) -> bool:
    return any(name in path.parts for name in SKIP_DIR_NAMES)


def read_text_safely(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8", errors="ignore")
    except OSError:
        return None


def is_url_allowlisted(line: str) -> bool:
    return any(re.search(pat, line) for pat in URL_ALLOWLIST_PATTERNS)


def is_comment_line(line: str) -> bool:
    return line.lstrip().startswith("#")


# ---------------------------------------------------------------------------
# スキャン
# ---------------------------------------------------------------------------


def scan_file(path: Path, root: Path) -> list[str]:
    """1 ファイルをスキャンし、問題を返す。"""
    issues: list[str] = []
    text = read_text_safely(path)
    if text is None:
        return issues

    rel = path.relative_to(root).as_posix()

    for pat in PURE_MODULES.get(rel, []):
        if re.search(pat, text, flags=re.MULTILINE):
            issues.append(f"依存違反: 純粋モジュールが協調者を import ({pat}) in {rel}")

    # URL 直書き（Python ファイルのコメント行以外）
    if path.suffix == ".py":
        for lineno, line in enumerate(text.splitlines(), start=1):
            if is_comment_line(line):
                continue
            if re.search(URL_PATTERN, line) and not is_url_allowlisted(line):
                issues.append(f"外部接続疑い: URL直書き検出 in {rel}:{lineno}")

    for pat in SECRET_PATTERNS:
        if re.search(pat, text):
            issues.append(f"秘密情報疑い: パターン検出 ({pat}) in {rel}")

    return issues


def collect_issues(root: Path = REPO_ROOT) -> list[str]:
    """``root`` 配下をスキャンし、すべての違反を返す。"""
    issues: list[str] = []

    if ".env" in git_ls_files(root):
        issues.append(
            "禁止: .env がリポジトリにコミットされています。削除し、gitignore 対象にしてください。"
        )

    for name in SCAN_DIRS:
        base = root / name
        if not base.exists():
            continue
        for path in sorted(base.rglob("*")):
            if not path.is_file() or should_skip(path):
                continue
            if path.relative_to(root).as_posix() in SKIP_FILES:
                continue
            if path.suffix.lower() not in SCAN_EXTENSIONS:
                continue
            issues.extend(scan_file(path, root))

    return issues


# ---------------------------------------------------------------------------
# メイン
# ---------------------------------------------------------------------------


def main(root: Path = REPO_ROOT) -> int:
    """ポリシーチェックを実行し、違反があれば非ゼロで終了する。"""
    issues = collect_issues(root)

    if issues:
        print("[policy_check] FAILED")
        for i, msg in enumerate(issues, start=1):
            print(f"  {i}. {msg}")
        return 1

    print("[policy_check] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
