"""
Core Logging Configuration
structlog 기반의 구조화된 로깅 설정
"""

import logging
import sys
from typing import Any, Optional

import structlog
from asgi_correlation_id import correlation_id

from catalog.core.config import settings


def add_request_id(logger: Any, method_name: str, event_dict: dict) -> dict:
    """요청 추적 ID(X-Request-ID)를 로그 이벤트에 추가"""
    request_id = correlation_id.get()
    if request_id is not None:
        event_dict.setdefault("request_id", request_id)
    return event_dict


def configure_logging() -> None:
    """
    structlog 및 표준 로깅 설정
    """

    # 공통 프로세서 (structlog & standard logging)
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        add_request_id,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
        structlog.processors.StackInfoRenderer(),
    ]

    # 렌더러 선택
    if settings.log_json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True, pad_event=20)

    # 1. structlog 자체 설정
    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # 2. 표준 logging 포맷터 설정 (structlog를 통해 렌더링)
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    # 3. 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level.upper())

    # 4. Uvicorn 및 라이브러리 로거가 루트 핸들러로 전파되도록 조정
    for _log in ["uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"]:
        logger = logging.getLogger(_log)
        logger.handlers = []
        logger.propagate = True


def get_logger(name: Optional[str] = None) -> Any:
    """
    구조화된 로거 반환
    """
    return structlog.get_logger(name)
