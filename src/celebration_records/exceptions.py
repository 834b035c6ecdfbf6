"""celebration_records における例外定義モジュール.

Purpose:
    - 値オブジェクトの構築失敗と設定不備を明確に区別する
    - 呼び出し側が code / context で原因を機械的に判定できるようにする

Notes:
    - 例外メッセージは英語（ログ/CI の一貫性）。
    - 本モジュールはパッケージ内の何も import しない（最下層に置ける根のモジュール）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(eq=False)
class CelebrationRecordsError(Exception):
    """プロジェクト共通の基底例外.

    Attributes:
        - message: 例外メッセージ（英語）
        - code: 機械判定用の短い識別子
        - context: 追加情報（field, value など任意）
    """

    message: str
    code: str = "CELEBRATION_RECORDS_ERROR"
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message

    def with_context(self, **kwargs: Any) -> "CelebrationRecordsError":
        """コンテキストを追加した同型例外を返す（例外自体は raise しない）."""
        merged = dict(self.context)
        merged.update(kwargs)
        err = type(self).__new__(type(self))
        CelebrationRecordsError.__init__(
            err,
            message=self.message,
            code=self.code,
            context=merged,
        )
        return err


class InvalidArgumentError(CelebrationRecordsError):
    """不正な引数による構築失敗.

    Examples:
        - SpecialDate の day が 1-31 の範囲外
        - Celebration を満たさないオブジェクトをカレンダーへ追加
    """

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            message=message,
            code="INVALID_ARGUMENT",
            context=dict(context or {}),
        )


class ConfigurationError(CelebrationRecordsError):
    """設定不備（読み込み時・正規化時に検出する）."""

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            context=dict(context or {}),
        )
