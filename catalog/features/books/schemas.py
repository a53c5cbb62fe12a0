from pydantic import BaseModel, ConfigDict, Field


class BookFields(BaseModel):
    """도서 데이터 필드 (생성 쿼리 파라미터 / 수정 본문)"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Hello",
                "author": "me",
                "description": "nothing",
                "genre": "Action",
            }
        }
    )

    title: str = Field(..., description="제목", max_length=255)
    author: str = Field(..., description="저자", max_length=255)
    description: str = Field(..., description="설명", max_length=2048)
    genre: str = Field(..., description="장르", max_length=100)


class BookResponse(BaseModel):
    """도서 응답"""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="도서 ID (자동 할당)")
    title: str
    author: str
    description: str
    genre: str
