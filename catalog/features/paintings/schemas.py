from pydantic import BaseModel, ConfigDict, Field

from catalog.core.database.base import INT32_MIN, INT32_MAX


class PaintingFields(BaseModel):
    """회화 데이터 필드 (수정 본문)"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Mona Lisa Painting",
                "artist": "Leonardo da Vinci",
                "year": 1517,
                "medium": "Oil",
                "period": "Renaissance",
            }
        }
    )

    name: str = Field(..., description="작품명", max_length=255)
    artist: str = Field(..., description="작가", max_length=255)
    year: int = Field(..., description="제작 연도", ge=INT32_MIN, le=INT32_MAX)
    medium: str = Field(..., description="재료/기법", max_length=255)
    period: str = Field(..., description="시대/사조", max_length=255)


class PaintingCreate(PaintingFields):
    """회화 생성 쿼리 파라미터 (code는 호출자가 지정)"""

    code: str = Field(..., description="작품 코드 (예: mona-lisa)", min_length=1, max_length=128)


class PaintingResponse(BaseModel):
    """회화 응답"""

    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    artist: str
    year: int
    medium: str
    period: str
