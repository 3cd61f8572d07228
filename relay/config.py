import os
from dataclasses import dataclass
from urllib.parse import urlparse

from .constants import ADAPTY_USERNAME, GCP_USERNAME
from .errors import ConfigurationError


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class Settings:
    # Destinos no Discord (um webhook por origem)
    gcp_discord_webhook_url: str = ""
    adapty_discord_webhook_url: str = ""

    # Tokens de autenticação das origens
    gcp_auth_token: str = ""
    adapty_auth_token: str = ""

    app_port: int = 5001
    debug_mode: bool = False
    discord_timeout_seconds: float = 10.0

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gcp_discord_webhook_url=os.getenv("GCP_DISCORD_WEBHOOK_URL", "").strip(),
            adapty_discord_webhook_url=os.getenv("ADAPTY_DISCORD_WEBHOOK_URL", "").strip(),
            gcp_auth_token=os.getenv("GCP_AUTH_TOKEN", ""),
            adapty_auth_token=os.getenv("ADAPTY_AUTH_TOKEN", ""),
            app_port=int(os.getenv("APP_PORT", "5001")),
            debug_mode=_env_bool("DEBUG_MODE", "False"),
            discord_timeout_seconds=float(os.getenv("DISCORD_TIMEOUT_SECONDS", "10")),
        )

    def validate(self) -> "Settings":
        for env_name, value in (
            ("GCP_DISCORD_WEBHOOK_URL", self.gcp_discord_webhook_url),
            ("ADAPTY_DISCORD_WEBHOOK_URL", self.adapty_discord_webhook_url),
        ):
            if not value:
                raise ConfigurationError(f"`{env_name}` is not set in the environment")
            parsed = urlparse(value)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                raise ConfigurationError(f"Invalid {env_name}: {value!r}")
        return self

    def webhook_url_for(self, username):
        """Escolhe o webhook do Discord a partir do remetente da mensagem."""
        if username == GCP_USERNAME:
            return self.gcp_discord_webhook_url
        if username == ADAPTY_USERNAME:
            return self.adapty_discord_webhook_url
        return None
