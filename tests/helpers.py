"""Shared test helpers: an in-memory stand-in for the Assistants API."""

from __future__ import annotations

import json
from functools import partial
from typing import Callable
from unittest.mock import patch

import httpx

API_PREFIX = "/v1/"
MAX_FILE_IDS = 10


def error_body(message: str, error_type: str = "invalid_request_error", code: str | None = None, param: str | None = None) -> dict:
    return {"error": {"message": message, "type": error_type, "param": param, "code": code}}


def patch_transport(handler: Callable[[httpx.Request], httpx.Response]):
    """Route every AsyncClient created by the client through ``handler``."""
    transport = httpx.MockTransport(handler)
    return patch(
        "assistant_threads.api.httpx.AsyncClient",
        partial(httpx.AsyncClient, transport=transport),
    )


class FakeThreadsService:
    """Minimal thread/message store speaking the service's JSON."""

    def __init__(self) -> None:
        self.threads: dict[str, dict] = {}
        self.messages: dict[str, list[dict]] = {}
        self.requests: list[httpx.Request] = []
        self._counter = 0

    def _next_id(self, prefix: str) -> str:
        self._counter += 1
        return f"{prefix}_{self._counter:04d}"

    def _not_found(self, thread_id: str) -> httpx.Response:
        return httpx.Response(404, json=error_body(f"No thread found with id '{thread_id}'."))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = json.loads(request.content) if request.content else None
        parts = request.url.path.removeprefix(API_PREFIX).split("/")

        if parts == ["threads"] and request.method == "POST":
            return self._create_thread(body)
        if len(parts) == 2 and parts[0] == "threads":
            thread_id = parts[1]
            if thread_id not in self.threads:
                return self._not_found(thread_id)
            if request.method == "GET":
                return httpx.Response(200, json=self.threads[thread_id])
            if request.method == "POST":
                self.threads[thread_id]["metadata"] = body["metadata"]
                return httpx.Response(200, json=self.threads[thread_id])
            if request.method == "DELETE":
                del self.threads[thread_id]
                self.messages.pop(thread_id, None)
                return httpx.Response(200, json={"id": thread_id, "object": "thread.deleted", "deleted": True})
        if len(parts) == 3 and parts[0] == "threads" and parts[2] == "messages" and request.method == "POST":
            thread_id = parts[1]
            if thread_id not in self.threads:
                return self._not_found(thread_id)
            if len(body.get("file_ids") or []) > MAX_FILE_IDS:
                return httpx.Response(
                    400,
                    json=error_body(
                        "Invalid 'file_ids': array too long.",
                        code="array_above_max_length",
                        param="file_ids",
                    ),
                )
            return httpx.Response(200, json=self._add_message(thread_id, body))

        return httpx.Response(404, json=error_body(f"Unknown route {request.method} {request.url.path}"))

    def _create_thread(self, body: dict) -> httpx.Response:
        thread_id = self._next_id("thread")
        self.threads[thread_id] = {
            "id": thread_id,
            "object": "thread",
            "created_at": 1700000000 + self._counter,
            "metadata": body.get("metadata") or {},
        }
        self.messages[thread_id] = []
        for message in body.get("messages", []):
            self._add_message(thread_id, message)
        return httpx.Response(200, json=self.threads[thread_id])

    def _add_message(self, thread_id: str, body: dict) -> dict:
        message = {
            "id": self._next_id("msg"),
            "object": "thread.message",
            "created_at": 1700000000 + self._counter,
            "thread_id": thread_id,
            "status": "completed",
            "role": body["role"],
            "content": [
                {"type": "text", "text": {"value": body["content"], "annotations": []}},
            ],
            "file_ids": body.get("file_ids", []),
            "metadata": body.get("metadata"),
        }
        self.messages[thread_id].append(message)
        return message
