"""
GraphQL Client Module

GraphQL endpoint에 쿼리를 POST하는 비동기 클라이언트입니다.
요청 경로는 core.http_client.post_text(JSON 헤더, body 원문 전송)를 그대로 사용합니다.

사용 흐름:
- 클라이언트 생성
- (선택) add_header로 인증 등 헤더 추가
- call로 쿼리 실행
"""

import logging

import httpx
from pydantic import ValidationError

from clients.schemas import GraphQLResponse, QueryBody
from core.http_client import JSON_HEADERS, post_text

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """GraphQLClient 요청 실패 기본 예외"""


class BodyError(ClientError):
    """요청 body를 JSON 문자열로 만들 수 없음"""

    def __init__(self) -> None:
        super().__init__("Request body is not a valid string")


class NetworkError(ClientError):
    """transport 수준 오류 (연결 실패, DNS, timeout 등)"""

    def __init__(self, message: str) -> None:
        super().__init__(f"Network error: {message}")
        self.message = message


class ResponseShapeError(ClientError):
    """응답이 GraphQL envelope 형태가 아님"""

    def __init__(self, text: str) -> None:
        super().__init__("Response shape error")
        self.text = text


class GraphQLClient:
    """
    GraphQL endpoint 클라이언트

    Args:
        endpoint: GraphQL API URI (절대 URL 또는 base_url이 있는 client 기준 경로)
        client: 재사용할 AsyncClient (None이면 요청마다 생성)
    """

    def __init__(self, endpoint: str, client: httpx.AsyncClient | None = None) -> None:
        self.endpoint = endpoint
        self.headers: dict[str, str] = {}
        self._client = client

    def add_header(self, name: str, value: str) -> None:
        """요청에 포함할 헤더 추가 (Authorization 등). JSON 기본 헤더보다 우선"""
        self.headers[name] = value

    async def call(self, query: QueryBody) -> GraphQLResponse:
        """
        쿼리 실행

        Args:
            query: 요청 body

        Returns:
            GraphQLResponse (errors가 있어도 예외로 바꾸지 않음)

        Raises:
            BodyError: variables 직렬화 실패
            NetworkError: transport 오류
            ResponseShapeError: 응답이 JSON envelope가 아님
        """
        try:
            body = query.to_json()
        except ValueError as e:
            logger.warning("GraphQL body serialization failed: %s", e)
            raise BodyError() from e

        result = await post_text(self.endpoint, body, headers=self.headers, client=self._client)
        if not result.success:
            raise NetworkError(result.error or "")

        logger.debug("response text as string: %r", result.text)
        try:
            return GraphQLResponse.model_validate_json(result.text or "")
        except ValidationError as e:
            raise ResponseShapeError(result.text or "") from e


async def post_graphql(
    client: httpx.AsyncClient,
    url: str,
    query: QueryBody,
) -> GraphQLResponse:
    """
    호출처 AsyncClient로 GraphQL 쿼리 전송.

    GraphQLClient.call과 달리 httpx/pydantic 예외를 그대로 전파합니다.
    """
    resp = await client.post(url, content=query.to_json(), headers=JSON_HEADERS)
    return GraphQLResponse.model_validate_json(resp.text)


def post_graphql_blocking(
    client: httpx.Client,
    url: str,
    query: QueryBody,
) -> GraphQLResponse:
    """post_graphql의 동기 버전 (httpx.Client 사용)"""
    resp = client.post(url, content=query.to_json(), headers=JSON_HEADERS)
    return GraphQLResponse.model_validate_json(resp.text)
