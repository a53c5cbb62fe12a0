"""
Request ID Middleware
요청 추적 ID(X-Request-ID) 부여
"""

from uuid import uuid4

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI


def setup_request_id(app: FastAPI) -> None:
    """
    요청마다 X-Request-ID를 발급/전파하는 미들웨어 등록

    클라이언트가 보낸 값이 있으면 그대로 사용하고, 없으면 새로 생성한다.
    로그(request_id)와 에러 응답 본문에서 같은 값을 사용한다.
    """
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        generator=lambda: uuid4().hex,
    )
