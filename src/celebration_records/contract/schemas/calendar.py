"""スキーマ定義：暦（月）と Celebration ケイパビリティ.

Policy:
    - Month は 1-12 の整数値を持つ列挙型（pydantic は int からも受け付ける）
    - Celebration は継承を要求しない構造的な契約（Protocol）とする
"""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable


class Month(IntEnum):
    """暦月（12 値固定）."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


@runtime_checkable
class Celebration(Protocol):
    """祝い事として扱える値の共通契約.

    name / day / month を公開していれば、継承なしで満たす。
    """

    @property
    def name(self) -> str: ...

    @property
    def day(self) -> int: ...

    @property
    def month(self) -> Month: ...
