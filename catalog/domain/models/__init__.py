"""
Domain Models
카탈로그 ORM 모델 (Alembic이 테이블을 인식하도록 모두 등록)
"""

from .book import Book
from .movie import Movie
from .painting import Painting

__all__ = ["Book", "Movie", "Painting"]
