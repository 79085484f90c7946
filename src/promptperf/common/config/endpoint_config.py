# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field, field_validator

from promptperf.common.config.base_config import BaseConfig
from promptperf.common.config.cli_parameter import CLIParameter
from promptperf.common.config.config_defaults import EndpointDefaults
from promptperf.common.config.groups import Groups


class EndpointConfig(BaseConfig):
    """Connection settings for an OpenAI-compatible streaming chat endpoint."""

    _CLI_GROUP = Groups.ENDPOINT

    model_name: Annotated[
        str,
        Field(min_length=1, description="Model name sent in each request."),
        CLIParameter(
            name=("--model-name", "-m"),
            group=_CLI_GROUP,
        ),
    ]

    url: Annotated[
        str,
        Field(description="Base URL of the inference server."),
        CLIParameter(
            name=("--url", "-u"),
            group=_CLI_GROUP,
        ),
    ] = EndpointDefaults.URL

    endpoint_path: Annotated[
        str,
        Field(description="Path of the chat completions route, appended to --url."),
        CLIParameter(
            name=("--endpoint-path",),
            group=_CLI_GROUP,
        ),
    ] = EndpointDefaults.ENDPOINT_PATH

    api_key: Annotated[
        str | None,
        Field(description="Bearer token sent in the Authorization header."),
        CLIParameter(
            name=("--api-key",),
            group=_CLI_GROUP,
        ),
    ] = EndpointDefaults.API_KEY

    max_tokens: Annotated[
        int,
        Field(ge=1, description="Maximum number of tokens to generate per run."),
        CLIParameter(
            name=("--max-tokens",),
            group=_CLI_GROUP,
        ),
    ] = EndpointDefaults.MAX_TOKENS

    temperature: Annotated[
        float,
        Field(ge=0, le=2, description="Sampling temperature."),
        CLIParameter(
            name=("--temperature",),
            group=_CLI_GROUP,
        ),
    ] = EndpointDefaults.TEMPERATURE

    request_timeout_seconds: Annotated[
        float,
        Field(
            gt=0,
            description="HTTP-level timeout for one request. Prefer --run-timeout-seconds to bound "
            "the measured call.",
        ),
        CLIParameter(
            name=("--request-timeout-seconds",),
            group=_CLI_GROUP,
        ),
    ] = EndpointDefaults.REQUEST_TIMEOUT_SECONDS

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                f"Invalid URL: '{v}'. The URL must start with http:// or https://"
            )
        return v.rstrip("/")

    @property
    def chat_completions_url(self) -> str:
        return f"{self.url}/{self.endpoint_path.lstrip('/')}"
