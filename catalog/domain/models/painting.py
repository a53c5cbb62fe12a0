"""
Painting Model
회화 ORM 모델
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.core.database.base import Base


class Painting(Base):
    """
    회화 모델

    Attributes:
        code: 작품 코드 (Primary Key, 호출자가 지정. 예: "mona-lisa")
        name: 작품명
        artist: 작가
        year: 제작 연도
        medium: 재료/기법
        period: 시대/사조
    """

    __tablename__ = "paintings"

    code: Mapped[str] = mapped_column(String(128), primary_key=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    artist: Mapped[str] = mapped_column(String(255), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    medium: Mapped[str] = mapped_column(String(255), nullable=False)
    period: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Painting(code={self.code!r}, name={self.name!r})>"
