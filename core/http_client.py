"""
공통 HTTP 클라이언트

JSON 헤더(Content-Type/Accept: application/json)로 POST 요청을 보내는 비동기 헬퍼.
- post_text: 응답 텍스트 또는 에러 문자열을 PostResult로 반환 (예외 전파 없음)
- convenient_post: 콜백 방식. 성공/실패 모두 on_success로 전달 (on_failure 미사용)

재시도·타임아웃·취소는 제공하지 않습니다 (호출처 책임).
"""

import logging
from collections.abc import Callable
from typing import Any

import httpx
from pydantic import BaseModel, Field

from core.config import settings

logger = logging.getLogger(__name__)

JSON_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

Callback = Callable[[str], Any]


class PostResult(BaseModel):
    """POST 결과 (success로 구분되는 tagged result)"""
    success: bool = Field(..., description="transport 수준 성공 여부 (HTTP status 무관)")
    status_code: int | None = Field(default=None, description="HTTP 상태 코드 (성공 시)")
    text: str | None = Field(default=None, description="응답 body 텍스트 (성공 시)")
    error: str | None = Field(default=None, description="에러 문자열 (실패 시)")

    @property
    def payload(self) -> str:
        """성공이면 응답 텍스트, 실패면 에러 문자열"""
        value = self.text if self.success else self.error
        return value or ""


def _client_options(timeout: float | None) -> dict[str, Any]:
    """AsyncClient 생성 옵션. 타임아웃 미지정 시 httpx 기본값 사용"""
    timeout = timeout if timeout is not None else settings.http_timeout
    if timeout is None:
        return {}
    return {"timeout": timeout}


def _describe_error(exc: Exception) -> str:
    # 메시지만 사용, 비어 있으면 (httpx 일부 예외) 클래스 이름
    return str(exc) or type(exc).__name__


async def post_text(
    url: str,
    body: str | bytes,
    *,
    headers: dict[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> PostResult:
    """
    JSON 헤더로 POST 요청 후 응답 body를 텍스트로 반환.

    Args:
        url: 전송 대상 URL (호출처에서 검증)
        body: 이미 직렬화된 JSON body. 변환 없이 그대로 전송
        headers: 추가 헤더 (JSON 기본 헤더 위에 덮어씀)
        client: 재사용할 AsyncClient (None이면 요청마다 생성 후 종료)
        timeout: 요청 타임아웃 (초, None이면 settings.http_timeout)

    Returns:
        PostResult. transport 오류(DNS, 연결 거부, timeout, 잘못된 URL 등)는
        success=False와 에러 문자열로 반환하며 예외로 전파하지 않습니다.
    """
    request_headers = dict(JSON_HEADERS)
    if headers:
        request_headers.update(headers)
    content = body.encode("utf-8") if isinstance(body, str) else body

    try:
        if client is not None:
            resp = await client.post(url, content=content, headers=request_headers)
        else:
            async with httpx.AsyncClient(**_client_options(timeout)) as owned_client:
                resp = await owned_client.post(url, content=content, headers=request_headers)
        text = resp.text
    except Exception as e:
        logger.warning("HTTP POST error: url=%s error=%s", url[:80], e)
        return PostResult(success=False, error=_describe_error(e))

    logger.debug("HTTP POST ok: url=%s status_code=%s", url[:80], resp.status_code)
    return PostResult(success=True, status_code=resp.status_code, text=text)


async def convenient_post(
    url: str,
    body: str | bytes,
    on_success: Callback,
    on_failure: Callback,
    *,
    client: httpx.AsyncClient | None = None,
) -> None:
    """
    POST 요청 후 결과 문자열을 on_success 콜백으로 전달.

    네트워크 실패 시에도 에러 문자열이 on_success로 전달됩니다.
    on_success 자체가 예외를 던지면 그 에러 문자열로 on_success를 한 번 더 호출합니다.
    on_failure는 인터페이스 대칭을 위해 받기만 하고 호출하지 않습니다.
    호출처는 내용으로 성공/실패를 구분해야 하며, 구분이 필요하면 post_text를 사용합니다.

    Args:
        url: 전송 대상 URL
        body: 이미 직렬화된 JSON body
        on_success: 응답 텍스트 (또는 에러 문자열)를 받는 콜백
        on_failure: 미사용 콜백
        client: 재사용할 AsyncClient
    """
    result = await post_text(url, body, client=client)
    try:
        on_success(result.payload)
    except Exception as e:
        # 콜백 예외도 문자열로 on_success에 다시 전달 (호출처로 전파하지 않음)
        logger.warning("on_success callback error: url=%s error=%s", url[:80], e)
        try:
            on_success(_describe_error(e))
        except Exception:
            logger.exception("on_success callback failed again: url=%s", url[:80])
