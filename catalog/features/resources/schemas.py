from pydantic import BaseModel, ConfigDict, Field


class GenericMessage(BaseModel):
    """단순 메시지 응답 (삭제 확인 등)"""

    model_config = ConfigDict(
        json_schema_extra={"example": {"message": "Book with id 7 deleted"}}
    )

    message: str = Field(..., description="처리 결과 메시지")
