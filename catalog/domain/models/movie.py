"""
Movie Model
영화 ORM 모델
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.core.database.base import Base


class Movie(Base):
    """
    영화 모델

    Attributes:
        id: 영화 ID (Primary Key, 호출자가 지정. 예: IMDb 번호 "1375666")
        title: 제목
        director: 감독
        release_year: 개봉 연도
    """

    __tablename__ = "movies"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    director: Mapped[str] = mapped_column(String(255), nullable=False)
    release_year: Mapped[int] = mapped_column(BigInteger, nullable=False)

    def __repr__(self) -> str:
        return f"<Movie(id={self.id!r}, title={self.title!r})>"
