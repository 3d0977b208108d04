import os

import httpx

DEFAULT_TIMEOUT_SECONDS = 10.0


def resolve_timeout(timeout: float | None = None) -> httpx.Timeout:
    """HTTP 呼び出しのタイムアウトを決定する

    引数 > 環境変数 HTTP_TIMEOUT_SECONDS > 既定値 の順で採用する。
    """
    seconds = (
        timeout
        if timeout is not None
        else float(os.getenv("HTTP_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS))
    )
    return httpx.Timeout(seconds, connect=min(seconds, 5.0))


def resolve_base_url(base_url: str | None, env_name: str) -> str:
    resolved = base_url or os.getenv(env_name)
    if not resolved:
        raise ValueError(f"{env_name} is not configured")
    return resolved.rstrip("/")
