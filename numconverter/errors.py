from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple


DEFAULT_ERROR_BODY: Dict[str, Any] = {"error": "Invalid input."}


class ValidationNormalizeMiddleware:
    """Rewrite FastAPI 422 validation responses into a 400 with a fixed body.

    Tool apps pass ``body`` so that a malformed request still gets the same
    JSON shape as any other failed conversion.
    """

    def __init__(self, app: Any, body: Dict[str, Any] | None = None) -> None:
        self.app = app
        self.payload = json.dumps(body or DEFAULT_ERROR_BODY).encode("utf-8")

    async def __call__(self, scope: Dict[str, Any], receive: Any, send: Any) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        state: Dict[str, Any] = {"status": 500, "headers": []}
        body_chunks: List[bytes] = []

        async def send_wrapper(message: Dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                state["status"] = message.get("status", 500)
                state["headers"] = list(message.get("headers", []))
                # only 422s are buffered
                if state["status"] != 422:
                    await send(message)
                return

            if message["type"] != "http.response.body" or state["status"] != 422:
                await send(message)
                return

            body_chunks.append(message.get("body", b"") or b"")
            if message.get("more_body"):
                return

            headers: List[Tuple[bytes, bytes]] = [
                (key, value)
                for key, value in state["headers"]
                if key.lower() not in {b"content-length", b"content-type"}
            ]
            headers.append((b"content-type", b"application/json"))
            headers.append((b"content-length", str(len(self.payload)).encode("latin-1")))
            await send({"type": "http.response.start", "status": 400, "headers": headers})
            await send({"type": "http.response.body", "body": self.payload})

        await self.app(scope, receive, send_wrapper)
