"""
Catalog Service
도서, 영화, 회화 카탈로그 REST 백엔드
"""

__version__ = "1.0.0"
