"""スキーマ定義：レコード（不変の値オブジェクト）.

Notes:
    - CelebrationGenericRecord: 任意の contents を包む汎用レコード（検証なし）
    - SpecialDate: 日付範囲の検証・作成日時の既定値・生成カウンタを持つレコード

Policy:
    - Pydantic v2 による検証とシリアライズ
    - extra="forbid", frozen=True（等価性・hash は全フィールドから導出）
    - 生成カウンタはフィールドではない（等価性・hash に含めない）
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Generic, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field, SkipValidation, model_validator

from celebration_records.contract.schemas.calendar import Month
from celebration_records.counter import InstanceCounter
from celebration_records.exceptions import InvalidArgumentError

T = TypeVar("T")

MIN_DAY = 1
MAX_DAY = 31


class CelebrationGenericRecord(BaseModel, Generic[T]):
    """任意の contents を持つ汎用レコード.

    Policy:
        - contents / name / day は渡された値をそのまま保持する（型変換・範囲検証なし）
        - contents は参照のまま保持する（T を束縛してもコピー・再検証しない）
        - contents が hash 不可なら、レコード自体も hash 不可
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    contents: SkipValidation[T] = Field(description="Arbitrary payload owned by this record.")
    name: SkipValidation[str] = Field(description="Celebration name.")
    day: SkipValidation[int] = Field(description="Day of month (not validated).")
    month: Month = Field(description="Calendar month.")


class SpecialDate(BaseModel):
    """記念日（不変）.

    Policy:
        - day は 1-31（月の日数は考慮しない。2/31 も受け付ける）
        - created 省略時は生成時点の現在日時（naive local time）
        - 生成成功ごとに date_counter を 1 増やす（失敗時は増やさない）
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    date_counter: ClassVar[InstanceCounter] = InstanceCounter("SpecialDate")

    name: str = Field(description="Celebration name.")
    day: int = Field(description="Day of month, 1-31.")
    month: Month = Field(description="Calendar month.")
    created: datetime = Field(
        default_factory=datetime.now,
        description="Creation timestamp. Defaults to now.",
    )

    @model_validator(mode="after")
    def _validate_day(self) -> "SpecialDate":
        # ValueError 派生ではないため ValidationError に包まれず送出される
        if self.day < MIN_DAY or self.day > MAX_DAY:
            raise InvalidArgumentError(
                "Day must be on the interval 1-31.",
                context={"day": self.day},
            )

        type(self).date_counter.increment()
        return self

    def total_dates(self) -> int:
        """これまでに生成に成功した SpecialDate の総数を返す（インスタンス固有の値ではない）."""
        return type(self).date_counter.value

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> "SpecialDate":
        """複製を返す. update 指定時は通常の生成経路を通す（検証・カウンタ加算あり）."""
        if update:
            return type(self)(**{**self.model_dump(), **update})
        return super().model_copy(deep=deep)
