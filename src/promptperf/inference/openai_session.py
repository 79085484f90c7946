# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Streaming session against an OpenAI-compatible chat completions endpoint."""

from collections.abc import AsyncIterator
from typing import Any

import aiohttp
import orjson

from promptperf.common.config import EndpointConfig
from promptperf.common.exceptions import InferenceRequestError
from promptperf.common.mixins import PromptPerfLoggerMixin

SSE_DATA_PREFIX = "data:"
SSE_DONE_MARKER = "[DONE]"


def parse_sse_delta(line: str) -> str | None:
    """Extract the content delta from one server-sent-events line.

    Returns None for blank lines, comments, non-data fields, the `[DONE]` marker
    and events without content (e.g. role-only or usage-only chunks).

    Raises:
        InferenceRequestError: If the data payload is not valid JSON or carries an error
    """
    line = line.strip()
    if not line.startswith(SSE_DATA_PREFIX):
        return None

    data = line[len(SSE_DATA_PREFIX) :].strip()
    if not data or data == SSE_DONE_MARKER:
        return None

    try:
        event = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        raise InferenceRequestError(f"Malformed stream event: {data[:200]}") from e

    if not isinstance(event, dict):
        raise InferenceRequestError(f"Unexpected stream event: {data[:200]}")
    if "error" in event:
        error = event["error"]
        message = error.get("message") if isinstance(error, dict) else error
        raise InferenceRequestError(f"Server reported an error: {message}")

    choices = event.get("choices") or []
    if not choices:
        return None
    delta = choices[0].get("delta") or {}
    return delta.get("content") or None


class OpenAIChatSession(PromptPerfLoggerMixin):
    """One streaming chat completion per `stream_generate` call.

    The server streams deltas. They are accumulated here so that every yielded
    chunk is the cumulative text so far, which is the contract the executor
    measures against. One yielded chunk per non-empty delta.
    """

    def __init__(self, endpoint_config: EndpointConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self.endpoint_config = endpoint_config

    def _build_payload(self, prompt_text: str) -> dict[str, Any]:
        return {
            "model": self.endpoint_config.model_name,
            "messages": [{"role": "user", "content": prompt_text}],
            "max_tokens": self.endpoint_config.max_tokens,
            "temperature": self.endpoint_config.temperature,
            "stream": True,
        }

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "text/event-stream",
        }
        if self.endpoint_config.api_key:
            headers["Authorization"] = f"Bearer {self.endpoint_config.api_key}"
        return headers

    async def stream_generate(self, prompt_text: str) -> AsyncIterator[str]:
        url = self.endpoint_config.chat_completions_url
        timeout = aiohttp.ClientTimeout(total=self.endpoint_config.request_timeout_seconds)

        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(
                url,
                data=orjson.dumps(self._build_payload(prompt_text)),
                headers=self._build_headers(),
            ) as response:
                if response.status >= 400:
                    body = await response.text()
                    raise InferenceRequestError(
                        f"Request to {url} failed with HTTP {response.status}: {body[:500]}"
                    )

                generated = ""
                async for raw_line in response.content:
                    line = raw_line.decode("utf-8", errors="replace")
                    if line.strip() == f"{SSE_DATA_PREFIX} {SSE_DONE_MARKER}":
                        break
                    delta = parse_sse_delta(line)
                    if delta is None:
                        continue
                    generated += delta
                    yield generated
