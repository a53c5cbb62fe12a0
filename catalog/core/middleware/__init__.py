"""
Middleware Module
CORS, 요청 추적 미들웨어 관리
"""

from .cors import setup_cors
from .request_id import setup_request_id

__all__ = ["setup_cors", "setup_request_id"]
