from __future__ import annotations

import logging

from fastmcp import FastMCP

from postal_field.app.container import build_container
from postal_field.app.logger import configure_logging
from postal_field.tools.postal_tools import register_postal_tools

log = logging.getLogger(__name__)

mcp = FastMCP("postal-field-mcp")

try:
    _container = build_container()
    configure_logging(_container.settings.log_level, _container.settings.log_format)
    register_postal_tools(mcp, _container)
    log.info("Postal code tools registered successfully")
except Exception as e:
    log.error("Failed to register postal code tools: %s", e, exc_info=True)
    raise


if __name__ == "__main__":
    settings = _container.settings
    mcp.run(
        transport="http",
        host=settings.mcp_host,
        port=settings.mcp_port,
        path=settings.mcp_path,
    )
