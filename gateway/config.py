# gateway/config.py

from dataclasses import dataclass
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _flag(name, default="false"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    backend_url: str = "http://localhost:3000"
    backend_timeout: float = 10.0
    graphql_path: str = "/graphql"
    graphiql: bool = False
    frontend_origin: str = "http://localhost:8080"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 4000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            backend_url=os.getenv("BACKEND_URL", cls.backend_url).rstrip("/"),
            backend_timeout=float(os.getenv("BACKEND_TIMEOUT", cls.backend_timeout)),
            graphql_path=os.getenv("GRAPHQL_PATH", cls.graphql_path),
            graphiql=_flag("GRAPHIQL"),
            frontend_origin=os.getenv("FRONTEND_ORIGIN", cls.frontend_origin),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", cls.port)),
        )
