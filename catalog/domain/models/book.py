"""
Book Model
도서 ORM 모델
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.core.database.base import Base


class Book(Base):
    """
    도서 모델

    Attributes:
        id: 도서 ID (Primary Key, 저장소가 자동 할당)
        title: 제목
        author: 저자
        description: 설명
        genre: 장르
    """

    __tablename__ = "books"

    # Primary Key (SQLite는 INTEGER PRIMARY KEY만 자동 증가)
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(String(2048), nullable=False)
    genre: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title={self.title!r})>"
