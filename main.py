"""
Convenient-Fetch Main Entry Point

convenient_post 데모: GraphQL 쿼리를 POST하고 콜백으로 받은 응답을 로깅합니다.

    python main.py [url]
"""

import asyncio
import logging
import sys

from clients.schemas import GraphQLQuery
from core.config import settings
from core.http_client import convenient_post
from core.logging_config import setup_logging

logger = logging.getLogger(__name__)


class PuppySmiles(GraphQLQuery):
    QUERY = """
query PuppySmiles($after: String) {
  reddit {
    subreddit(name: "puppysmiles") {
      newListings(limit: 6, after: $after) {
        fullnameId
        title
        url
      }
    }
  }
}
"""
    OPERATION_NAME = "PuppySmiles"


def on_success(text: str) -> None:
    """응답 body (또는 에러 문자열) 출력"""
    logger.info("response body\n\n%s", text)


def on_failure(text: str) -> None:
    logger.error("sad :( %s", text)


async def run(url: str) -> None:
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)
    body = PuppySmiles.build_query({"after": None}).to_json()
    await convenient_post(url, body, on_success, on_failure)
    logger.info("Bye")


if __name__ == "__main__":
    setup_logging()
    target_url = sys.argv[1] if len(sys.argv) > 1 else settings.graphql_endpoint
    asyncio.run(run(target_url))
