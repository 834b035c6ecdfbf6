"""プロセス単位の生成カウンタ。

設計意図:
- 「クラス全体で共有される静的カウンタ」を、隠れたグローバル変数ではなく
  明示的なオブジェクトとして持つ（差し替え・テストが容易）。
- increment は read-modify-write を Lock で不可分にする（スレッド間で取りこぼさない）。
- リセット・減算は提供しない（プロセスの寿命の間、単調増加）。
"""

from __future__ import annotations

import threading

from celebration_records.core.logging import get_logger

logger = get_logger(__name__)


class InstanceCounter:
    """生成成功回数を数える単調増加カウンタ."""

    def __init__(self, name: str) -> None:
        """初期化.

        Args:
            name: ログ出力用の識別名（例: "SpecialDate"）。
        """
        self._name = name
        self._value = 0
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> int:
        """現在のカウント値を返す."""
        with self._lock:
            return self._value

    def increment(self) -> int:
        """カウントを 1 増やし、増加後の値を返す."""
        with self._lock:
            self._value += 1
            value = self._value
        logger.debug("%s count incremented to %d", self._name, value)
        return value

    def __repr__(self) -> str:
        return f"InstanceCounter(name={self._name!r}, value={self.value})"
