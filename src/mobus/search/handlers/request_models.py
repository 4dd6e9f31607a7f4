from pydantic import BaseModel, ConfigDict, Field


class SearchRoutesRequest(BaseModel):
    """路線検索リクエストモデル（クエリ文字列）"""

    model_config = ConfigDict(populate_by_name=True)

    from_city: str = Field(..., alias="from", min_length=1, description="出発地")
    to_city: str = Field(..., alias="to", min_length=1, description="目的地")
    date: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="乗車日（YYYY-MM-DD形式）",
        examples=["2025-01-01"],
    )
