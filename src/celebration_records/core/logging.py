"""ロギング設定.

設計意図:
- ライブラリ側は `get_logger(__name__)` で取得したロガーに DEBUG で記録するだけにする。
- ハンドラの設定は利用者（テスト・アプリ）が `setup_logging` で明示的に行う。
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Mapping

from celebration_records.exceptions import ConfigurationError

PACKAGE_LOGGER = "celebration_records"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def setup_logging(level: str = "INFO", fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """パッケージロガーに stdout ハンドラを設定する（再呼び出し時は置き換える）.

    Args:
        level: ログレベル（DEBUG, INFO, WARNING, ERROR, CRITICAL。大小文字は問わない）。
        fmt: logging.Formatter の書式。

    Returns:
        設定済みのパッケージロガー。

    Raises:
        ConfigurationError: level が不明な場合。
    """
    level_u = level.strip().upper() if isinstance(level, str) else ""
    if level_u not in LOG_LEVELS:
        allowed = ", ".join(sorted(LOG_LEVELS))
        raise ConfigurationError(f"Unknown log level: {level!r}. Allowed: {allowed}", context={"value": level})
    numeric_level = getattr(logging, level_u)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt))
    package_logger.addHandler(handler)

    return package_logger


def setup_logging_from_config(config: Mapping[str, Any]) -> logging.Logger:
    """resolver 済み設定の logging セクションを適用する."""
    section = config.get("logging", {})
    return setup_logging(level=str(section.get("level", "INFO")))


def get_logger(name: str) -> logging.Logger:
    """モジュール用ロガーを返す."""
    return logging.getLogger(name)
