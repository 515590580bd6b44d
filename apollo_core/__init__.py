# =============================================================================
# apollo_core/__init__.py
# =============================================================================
# This package holds everything the Apollo.io tool server knows about the
# remote API: configuration, the HTTP client, the validated input models and
# the summary projections.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or the MCP SDK.  The MCP wiring
#   lives in apollo_tools/; this package only talks to Apollo and shapes data.
# =============================================================================

__version__ = "0.1.0"
