import os
import logging
from typing import Any, Dict, Optional

import orjson
from fastapi.responses import Response

from ..core.config import COMMON_HEADERS

logger = logging.getLogger("ClaudeCliProxy.Utils")


def new_request_id() -> str:
    return os.urandom(8).hex()


def orjson_dumps_bytes_wrapper(data: Any) -> bytes:
    return orjson.dumps(
        data,
        option=orjson.OPT_NON_STR_KEYS | orjson.OPT_PASSTHROUGH_DATETIME | orjson.OPT_APPEND_NEWLINE
    )


def json_response(
    data: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None
) -> Response:
    final_headers = {**COMMON_HEADERS, **(headers or {})}
    return Response(
        content=orjson_dumps_bytes_wrapper(data),
        status_code=status_code,
        media_type="application/json",
        headers=final_headers,
    )


def error_response(
    code: int,
    msg: str,
    request_id: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None
) -> Response:
    log_msg = f"Error {code}: {msg}"
    if request_id:
        log_msg = f"RID-{request_id}: {log_msg}"
    logger.warning(log_msg)

    content = {"error": {"message": msg, "code": code, "type": "proxy_error"}}
    if request_id:
        content["error"]["request_id"] = request_id
    return json_response(content, status_code=code, headers=headers)
