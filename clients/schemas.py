"""
GraphQL 요청/응답 스키마

- QueryBody: POST body {"query", "variables", "operationName"}
- GraphQLQuery: 쿼리 정의 (QUERY, OPERATION_NAME) → build_query
- GraphQLResponse: 응답 envelope {"data", "errors"}
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class QueryBody(BaseModel):
    """GraphQL 요청 body"""
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., description="GraphQL 쿼리 문자열")
    operation_name: str = Field(..., alias="operationName", description="실행할 operation 이름")
    variables: Any = Field(default=None, description="쿼리 변수 (JSON 직렬화 가능해야 함)")

    def to_json(self) -> str:
        """alias(operationName) 기준 JSON 직렬화"""
        return self.model_dump_json(by_alias=True)


class GraphQLQuery:
    """
    쿼리 정의 기본 클래스

    하위 클래스는 QUERY, OPERATION_NAME을 지정하고
    build_query(variables)로 요청 body를 만듭니다.
    """
    QUERY: ClassVar[str]
    OPERATION_NAME: ClassVar[str]

    @classmethod
    def build_query(cls, variables: Any = None) -> QueryBody:
        """variables를 담은 QueryBody 생성"""
        return QueryBody(query=cls.QUERY, operation_name=cls.OPERATION_NAME, variables=variables)


class Location(BaseModel):
    """쿼리 내 에러 위치"""
    line: int = 0
    column: int = 0


class GraphQLError(BaseModel):
    """
    응답 최상위 errors 배열의 원소

    message만 필수이며 나머지는 서버에 따라 생략될 수 있습니다.
    """
    message: str
    locations: list[Location] | None = None
    # 객체 key(str) 또는 배열 index(int), 예: ["users", 0, "email"]
    path: list[str | int] | None = None
    extensions: dict[str, Any] | None = None

    def __str__(self) -> str:
        path = "/".join(str(fragment) for fragment in self.path) if self.path else "<query>"
        loc = self.locations[0] if self.locations else Location()
        return f"{path}:{loc.line}:{loc.column}: {self.message}"


class GraphQLResponse(BaseModel):
    """GraphQL 응답 envelope (data는 부재/부분/완전 모두 가능)"""
    data: Any = None
    errors: list[GraphQLError] | None = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
