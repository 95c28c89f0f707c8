# -*- coding: utf-8 -*-
"""
Serverless function adapter

Accepts a Netlify/Lambda-style event ({"httpMethod", "body"}) and returns
{"statusCode", "headers", "body"} with a JSON body.
"""

import asyncio
import json
from typing import Any, Dict, Optional

from ..main import run_export
from ..utils.error_handler import GENERIC_ERROR_MESSAGE
from ..utils.logger import get_logger

logger = get_logger("Serverless")

JSON_HEADERS = {"Content-Type": "application/json"}


def _response(status_code: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(payload, ensure_ascii=False),
    }


def _parse_body(raw: Any) -> Dict[str, Any]:
    if not raw:
        return {}
    body = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
    if not isinstance(body, dict):
        raise ValueError("request body must be a JSON object")
    return body


async def handle_event(event: Dict[str, Any]) -> Dict[str, Any]:
    method = str(event.get("httpMethod", "")).upper()
    if method != "POST":
        return _response(405, {"error": "Method not allowed"})

    try:
        body = _parse_body(event.get("body"))
        result = await run_export(body.get("disease_type"), body.get("num_records"))
        return _response(200, result)
    except Exception as e:
        logger.error(f"❌ Serverless generate failed: {e}", exc_info=True)
        return _response(500, {"error": GENERIC_ERROR_MESSAGE})


def handler(event: Dict[str, Any], context: Optional[Any] = None) -> Dict[str, Any]:
    """Synchronous entry point for function runtimes"""
    return asyncio.run(handle_event(event))
