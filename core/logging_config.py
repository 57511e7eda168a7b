"""
Logging Configuration

settings.log_level / settings.log_format 기반 루트 로거 설정.
- text: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
- json: 한 줄 JSON (ts, level, app, env, logger, msg)
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

from core.config import Settings, settings as default_settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """로그 레코드를 한 줄 JSON으로 직렬화"""

    def __init__(self, app_name: str, app_env: str) -> None:
        super().__init__()
        self.app_name = app_name
        self.app_env = app_env

    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "app": self.app_name,
            "env": self.app_env,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            base["exception"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def setup_logging(config: Settings | None = None) -> None:
    """
    루트 로거 설정 (진입점에서 1회 호출)

    Args:
        config: 사용할 Settings (None이면 전역 settings)
    """
    config = config or default_settings
    level = getattr(logging, config.log_level)

    if config.log_format == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter(config.app_name, config.app_env))
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(level=level, format=TEXT_FORMAT, force=True)

    # httpx 요청 로그는 DEBUG에서만
    if level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
