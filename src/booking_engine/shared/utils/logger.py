import logging
import os
import sys
from typing import Any

import structlog


def get_logger(service_name: str) -> Any:
    """サービス名をバインドしたロガーを返す（設定は初回使用時に解決される）"""
    return structlog.get_logger(service_name, service=service_name)


def configure_logging(json_format: bool | None = None, log_level: str | None = None) -> None:
    """構造化ログを設定する

    Args:
        json_format: True なら JSON 出力。未指定なら LOG_JSON 環境変数に従う
        log_level: 最低ログレベル。未指定なら LOG_LEVEL 環境変数（既定 INFO）
    """
    if json_format is None:
        json_format = os.getenv("LOG_JSON", "true").lower() == "true"
    level_name = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_format:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
    )
