# =============================================================================
# apollo_tools/__init__.py
# =============================================================================
# This package exposes Apollo.io operations as MCP tools.
#
# ARCHITECTURAL ROLE:
#   apollo_tools/ is the translation layer between the MCP runtime and
#   apollo_core/:
#     - adapter.py     catalog, validation, dispatch, response formatting
#     - errors.py      the error categories a caller can receive
#     - mcp_server.py  FastMCP server that registers one tool per catalog entry
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP themselves (that's apollo_core/client.py)
#   - They do NOT retry, cache or paginate on the caller's behalf
# =============================================================================
