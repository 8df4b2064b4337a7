"""FastMCP server exposing Luma's realm content as MCP tools.

Tools:
  - realm_personality(realm)                         : personality descriptor
  - fallback_response(message, realm)                : offline keyword reply
  - integration_snippet(platform, kind, realm, base_url): LMS/Twine snippet

Nothing here calls the LLM; every tool is deterministic.

Usage:
    uv run python -m backend.mcp_server
"""

from mcp.server.fastmcp import FastMCP

from luma_wisp.engine import get_fallback_response
from luma_wisp.integrations import render_integration
from luma_wisp.models import REALMS
from luma_wisp.personalities import lookup

mcp = FastMCP("luma-wisp")


def _check_realm(realm: str) -> None:
    if realm not in REALMS:
        raise ValueError(f"Unknown realm {realm!r}; expected one of {', '.join(REALMS)}")


@mcp.tool()
def realm_personality(realm: str) -> dict:
    """Return the greeting, voice tone, special phrases and teachings of a realm."""
    _check_realm(realm)
    return lookup(realm).model_dump(by_alias=True, mode="json")


@mcp.tool()
def fallback_response(message: str, realm: str) -> str:
    """Return the reply Luma gives in `realm` when no language model is available."""
    _check_realm(realm)
    return get_fallback_response(message, realm)


@mcp.tool()
def integration_snippet(platform: str, kind: str, realm: str, base_url: str) -> dict:
    """Render an LMS (widget/iframe/api) or Twine (macros/widget/story) snippet."""
    _check_realm(realm)
    snippet = render_integration(platform, kind, realm, base_url)
    return {"filename": snippet.filename, "code": snippet.code}


if __name__ == "__main__":
    mcp.run()
