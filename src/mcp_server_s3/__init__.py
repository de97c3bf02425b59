"""
MCP server exposing S3 object storage operations as tools.
"""

__version__ = "1.0.0"
