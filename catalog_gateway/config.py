import os

# Administrator service settings
ADMIN_BASE_URL = os.environ.get("CATALOG_ADMIN_BASE_URL", "http://admin")
ADMIN_TIMEOUT = float(os.environ.get("CATALOG_ADMIN_TIMEOUT", "5.0"))

HOST = os.environ.get("CATALOG_HOST", "0.0.0.0")
PORT = int(os.environ.get("CATALOG_PORT", "8080"))
LOG_LEVEL = os.environ.get("CATALOG_LOG_LEVEL", "INFO")

# Where the MCP server finds the gateway
GATEWAY_URL = os.environ.get("CATALOG_GATEWAY_URL", f"http://localhost:{PORT}")
