from pydantic import BaseModel, ConfigDict, Field

from catalog.core.database.base import INT64_MIN, INT64_MAX


class MovieFields(BaseModel):
    """영화 데이터 필드 (수정 본문)"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Inception",
                "director": "Christopher Nolan",
                "release_year": 2010,
            }
        }
    )

    title: str = Field(..., description="제목", max_length=255)
    director: str = Field(..., description="감독", max_length=255)
    release_year: int = Field(..., description="개봉 연도", ge=INT64_MIN, le=INT64_MAX)


class MovieCreate(MovieFields):
    """영화 생성 쿼리 파라미터 (id는 호출자가 지정)"""

    id: str = Field(..., description="영화 ID (예: IMDb 번호)", min_length=1, max_length=64)


class MovieResponse(BaseModel):
    """영화 응답"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    director: str
    release_year: int
