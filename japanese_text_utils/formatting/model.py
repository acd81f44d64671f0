"""
表示・出力用の整形機能に関するモデル（データ構造）
"""

from typing import Literal

from pydantic import BaseModel, Field

PhoneNumberFormatType = Literal["mobile", "landline", "auto"]
Counter = Literal["人", "個", "冊", "枚", "本", "匹", "台", "回"]


class Address(BaseModel):
    """
    住所の構成要素
    """

    postal_code: str | None = Field(default=None, description="郵便番号")
    prefecture: str | None = Field(default=None, description="都道府県")
    city: str | None = Field(default=None, description="市区町村")
    town: str | None = Field(default=None, description="町域・番地")
    building: str | None = Field(default=None, description="建物名")
