# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_coderunner

from typing import Any

import anyio.to_thread
from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import ValidationError

from coreason_coderunner.config import RunnerConfig
from coreason_coderunner.models import Assertion
from coreason_coderunner.report import render_report
from coreason_coderunner.runner import run
from coreason_coderunner.utils.logger import logger

config = RunnerConfig()

# Initialize MCP Server
mcp = FastMCP("coreason-coderunner")


@mcp.tool()  # type: ignore[misc]
async def run_code(source: str, assertions: list[dict[str, Any]] | None = None) -> list[TextContent]:
    """
    Run JavaScript source and grade its console output.
    Each assertion is an object with `name` and `expectedOutput`.
    Returns a readable report followed by the result as JSON.
    """
    try:
        checks = [Assertion.model_validate(item) for item in assertions or []]
    except ValidationError as e:
        logger.warning(f"Rejected run_code call with invalid assertions: {e}")
        return [TextContent(type="text", text=f"Invalid assertions: {e!s}")]

    result = await anyio.to_thread.run_sync(run, source, checks, config)

    return [
        TextContent(type="text", text=render_report(result)),
        TextContent(type="text", text=result.model_dump_json(by_alias=True)),
    ]


def main() -> None:
    """Entry point for the MCP server."""
    mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
