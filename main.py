# =============================================================================
# main.py  -  Entry Point for the Apollo.io MCP Server
# =============================================================================
#
# HOW TO RUN:
#   APOLLO_API_KEY=... uv run python main.py
#   (or the installed console script: apollo-io-mcp)
#
# WHAT HAPPENS:
#   1. Loads a .env file if present (APOLLO_API_KEY and friends)
#   2. Builds ApolloConfig; exits with status 1 if the key is missing
#   3. Configures logging to stderr
#   4. Creates one ApolloClient and one ApolloToolAdapter for the process
#   5. Registers the tools on a FastMCP server and serves it over stdio
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

from apollo_core.client import ApolloClient
from apollo_core.config import API_KEY_URL, ApolloConfig, ConfigError
from apollo_tools.adapter import ApolloToolAdapter
from apollo_tools.mcp_server import create_server


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def main() -> None:
    """Start the Apollo.io tool server on the stdio transport."""
    load_dotenv()

    try:
        config = ApolloConfig.from_env()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(f"Get your API key from: {API_KEY_URL}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config.log_level)

    with ApolloClient(config) as client:
        server = create_server(ApolloToolAdapter(client))
        logging.info("Apollo.io MCP server running")
        server.run()


if __name__ == "__main__":
    main()
