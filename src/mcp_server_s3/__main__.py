"""
S3 MCP Server - Module Entry Point

Allows running the server as a Python module:
    python -m mcp_server_s3
"""
from mcp_server_s3.server import main

if __name__ == "__main__":
    main()
