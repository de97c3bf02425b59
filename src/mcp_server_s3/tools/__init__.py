"""
S3 MCP tool domains.
"""
