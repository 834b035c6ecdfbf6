"""デフォルト設定（最小）。

設計意図:
- ロギングの「存在してよい初期値」を定義する。
- 環境依存・I/O・動的解決は行わない（resolver が責務を持つ）。
"""

from __future__ import annotations


# ====================
# Logging defaults
# ====================

LOGGING_DEFAULTS: dict[str, object] = {
    "level": "INFO",
}

DEFAULTS: dict[str, dict[str, object]] = {
    "logging": LOGGING_DEFAULTS,
}
