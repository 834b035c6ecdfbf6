"""スキーマ定義：国民の祝日（可変のデータキャリア）."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NationalHoliday(BaseModel):
    """祝日を持つ国（可変）.

    frozen にしないため hash 不可。等価性は country の値で判定する。
    """

    model_config = ConfigDict(extra="forbid")

    country: str = Field(description="Country observing the holiday.")

    def get_country(self) -> str:
        return self.country

    def set_country(self, country: str) -> None:
        self.country = country
