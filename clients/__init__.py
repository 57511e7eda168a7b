"""
Convenient-Fetch Clients Module

HTTP POST 헬퍼 위에 구성된 클라이언트:
- GraphQLClient: GraphQL 쿼리 실행
"""

from clients.graphql_client import (
    BodyError,
    ClientError,
    GraphQLClient,
    NetworkError,
    ResponseShapeError,
    post_graphql,
    post_graphql_blocking,
)
from clients.schemas import GraphQLError, GraphQLQuery, GraphQLResponse, Location, QueryBody

__all__ = [
    "BodyError",
    "ClientError",
    "GraphQLClient",
    "GraphQLError",
    "GraphQLQuery",
    "GraphQLResponse",
    "Location",
    "NetworkError",
    "QueryBody",
    "ResponseShapeError",
    "post_graphql",
    "post_graphql_blocking",
]
