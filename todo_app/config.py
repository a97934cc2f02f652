"""Runtime configuration for the todo MCP server."""
from dataclasses import dataclass
from pathlib import Path
import os
from dotenv import load_dotenv

# Load environment variables from a local .env file if present
load_dotenv()

DEFAULT_WIDGET_PATH = Path(__file__).resolve().parent / "static" / "todo-widget.html"


@dataclass(frozen=True)
class Settings:
    """Settings resolved from the environment."""
    port: int = 8787
    host: str = "0.0.0.0"
    mcp_path: str = "/mcp"
    widget_path: Path = DEFAULT_WIDGET_PATH
    log_level: str = "INFO"
    environment: str = "development"

    @classmethod
    def from_env(cls) -> "Settings":
        mcp_path = os.environ.get("MCP_PATH", "/mcp")
        if not mcp_path.startswith("/"):
            mcp_path = "/" + mcp_path

        return cls(
            port=int(os.environ.get("PORT", "8787")),
            host=os.environ.get("HOST", "0.0.0.0"),
            mcp_path=mcp_path,
            widget_path=Path(os.environ.get("TODO_WIDGET_PATH", str(DEFAULT_WIDGET_PATH))),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            environment=os.environ.get("ENVIRONMENT", "development"),
        )


def get_settings() -> Settings:
    """Dependency for getting the current settings."""
    return Settings.from_env()
