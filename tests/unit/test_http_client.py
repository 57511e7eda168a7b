"""
HTTP POST 헬퍼 단위 테스트

httpx.MockTransport로 네트워크 없이 요청 형태와 콜백 전달을 검증합니다.
"""

import asyncio
from unittest.mock import MagicMock

import httpx
import pytest

from core import http_client
from core.http_client import JSON_HEADERS, PostResult, convenient_post, post_text


def _mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.mark.asyncio
async def test_convenient_post_ok_goes_to_on_success():
    """200 "ok" → on_success("ok"), on_failure 미호출"""
    on_success = MagicMock()
    on_failure = MagicMock()

    async with _mock_client(lambda request: httpx.Response(200, text="ok")) as client:
        await convenient_post("https://example.com/graphql", "{}", on_success, on_failure, client=client)

    on_success.assert_called_once_with("ok")
    on_failure.assert_not_called()


@pytest.mark.asyncio
async def test_convenient_post_connection_error_goes_to_on_success():
    """연결 실패 → 에러 문자열이 on_success로 전달"""
    on_success = MagicMock()
    on_failure = MagicMock()

    async with _mock_client(_refuse) as client:
        await convenient_post("http://unreachable.invalid/", "{}", on_success, on_failure, client=client)

    on_success.assert_called_once_with("Connection refused")
    on_failure.assert_not_called()


@pytest.mark.asyncio
async def test_convenient_post_http_error_status_is_not_special():
    """HTTP 500도 응답 텍스트 그대로 on_success"""
    on_success = MagicMock()
    on_failure = MagicMock()

    async with _mock_client(lambda request: httpx.Response(500, text="boom")) as client:
        await convenient_post("https://example.com/", "{}", on_success, on_failure, client=client)

    on_success.assert_called_once_with("boom")
    on_failure.assert_not_called()


@pytest.mark.asyncio
async def test_request_is_post_with_json_headers_and_verbatim_body():
    """method=POST, JSON 헤더, body 원문 그대로 전송"""
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, text="ok")

    async with _mock_client(handler) as client:
        await post_text("https://example.com/graphql", '{"a":1}', client=client)

    assert len(captured) == 1
    request = captured[0]
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Accept"] == "application/json"
    assert request.content == b'{"a":1}'


@pytest.mark.asyncio
async def test_non_json_body_still_sent_with_json_headers():
    """body가 JSON이 아니어도 헤더는 동일"""
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200)

    async with _mock_client(handler) as client:
        await post_text("https://example.com/", "plain text, not json", client=client)

    assert captured[0].headers["Content-Type"] == "application/json"
    assert captured[0].headers["Accept"] == "application/json"
    assert captured[0].content == b"plain text, not json"


@pytest.mark.asyncio
async def test_concurrent_calls_do_not_cross_talk():
    """동시 호출 2건이 각자의 콜백으로 전달"""

    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/slow":
            await asyncio.sleep(0.05)
        return httpx.Response(200, text=request.url.path)

    first_success, first_failure = MagicMock(), MagicMock()
    second_success, second_failure = MagicMock(), MagicMock()

    async with _mock_client(handler) as client:
        await asyncio.gather(
            convenient_post("https://example.com/slow", "{}", first_success, first_failure, client=client),
            convenient_post("https://example.com/fast", "{}", second_success, second_failure, client=client),
        )

    first_success.assert_called_once_with("/slow")
    second_success.assert_called_once_with("/fast")
    first_failure.assert_not_called()
    second_failure.assert_not_called()


@pytest.mark.asyncio
async def test_post_text_success_result():
    async with _mock_client(lambda request: httpx.Response(404, text="missing")) as client:
        result = await post_text("https://example.com/", "{}", client=client)

    assert result == PostResult(success=True, status_code=404, text="missing")
    assert result.payload == "missing"


@pytest.mark.asyncio
async def test_post_text_failure_result():
    """transport 오류는 예외 없이 success=False"""
    async with _mock_client(_refuse) as client:
        result = await post_text("https://example.com/", "{}", client=client)

    assert result.success is False
    assert result.status_code is None
    assert result.error == "Connection refused"
    assert result.payload == "Connection refused"


@pytest.mark.asyncio
async def test_post_text_invalid_url_is_reported_not_raised():
    """프로토콜 없는 URL도 에러 문자열로 반환"""
    result = await post_text("not-a-url", "{}")

    assert result.success is False
    assert result.error


@pytest.mark.asyncio
async def test_post_text_extra_headers_override_defaults():
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200)

    async with _mock_client(handler) as client:
        await post_text(
            "https://example.com/",
            "{}",
            headers={"Authorization": "Bearer token", "Accept": "application/graphql-response+json"},
            client=client,
        )

    assert captured[0].headers["Authorization"] == "Bearer token"
    assert captured[0].headers["Accept"] == "application/graphql-response+json"
    assert captured[0].headers["Content-Type"] == "application/json"


def test_json_headers_constant():
    assert JSON_HEADERS == {"Content-Type": "application/json", "Accept": "application/json"}


def test_post_result_empty_error_payload():
    assert PostResult(success=False).payload == ""


def test_describe_error_falls_back_to_class_name():
    assert http_client._describe_error(httpx.ReadTimeout("")) == "ReadTimeout"
    assert http_client._describe_error(ValueError("bad")) == "bad"


def test_client_options_uses_transport_default(monkeypatch):
    """타임아웃 미설정 시 AsyncClient 옵션 없음"""
    monkeypatch.setattr(http_client.settings, "http_timeout", None)
    assert http_client._client_options(None) == {}
    assert http_client._client_options(2.5) == {"timeout": 2.5}


def test_client_options_uses_settings_timeout(monkeypatch):
    monkeypatch.setattr(http_client.settings, "http_timeout", 7.0)
    assert http_client._client_options(None) == {"timeout": 7.0}


@pytest.mark.asyncio
async def test_on_success_error_is_routed_back_to_on_success():
    """on_success 예외 → 에러 문자열로 on_success 재호출, 호출처로 전파 없음"""
    calls: list[str] = []

    def on_success(text: str) -> None:
        calls.append(text)
        if len(calls) == 1:
            raise ValueError("handler broke")

    on_failure = MagicMock()

    async with _mock_client(lambda request: httpx.Response(200, text="ok")) as client:
        await convenient_post("https://example.com/", "{}", on_success, on_failure, client=client)

    assert calls == ["ok", "handler broke"]
    on_failure.assert_not_called()


@pytest.mark.asyncio
async def test_on_success_failing_twice_is_not_raised():
    """두 번째 호출도 실패하면 로그만 남김"""
    on_success = MagicMock(side_effect=RuntimeError("still broken"))
    on_failure = MagicMock()

    async with _mock_client(lambda request: httpx.Response(200, text="ok")) as client:
        await convenient_post("https://example.com/", "{}", on_success, on_failure, client=client)

    assert on_success.call_count == 2
    assert on_success.call_args_list[1].args == ("still broken",)
    on_failure.assert_not_called()


@pytest.mark.asyncio
async def test_convenient_post_refused_connection_without_injected_client():
    """실제 닫힌 포트 → 에러 문자열이 on_success로 전달 (요청마다 생성하는 client 경로)"""
    on_success = MagicMock()
    on_failure = MagicMock()

    await convenient_post("http://127.0.0.1:1/", '{"a":1}', on_success, on_failure)

    on_success.assert_called_once()
    payload = on_success.call_args.args[0]
    assert isinstance(payload, str)
    assert payload
    on_failure.assert_not_called()


def test_describe_error_uses_message_without_class_name():
    """에러 문자열은 메시지만 (클래스 이름 미포함)"""
    assert http_client._describe_error(httpx.ConnectError("Connection refused")) == "Connection refused"
