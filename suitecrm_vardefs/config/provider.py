"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol


@dataclass(frozen=True)
class CRMConfig:
    """SuiteCRM API connection settings."""
    base_url: str
    client_id: str = ""
    client_secret: str = field(default="", repr=False)
    username: str = ""
    password: str = field(default="", repr=False)

    def __post_init__(self):
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")

    @property
    def access_token_endpoint(self) -> str:
        """OAuth2 token endpoint."""
        return f"{self.base_url}access_token"

    @property
    def modules_endpoint(self) -> str:
        """Module metadata endpoint."""
        return f"{self.base_url}V8/meta/modules"

    @property
    def vardefs_endpoint(self) -> str:
        """Base of the per-module vardefs endpoint."""
        return f"{self.base_url}V8/module/vardefs"


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_crm_config(self) -> CRMConfig:
        """Get SuiteCRM configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        overrides: Optional[Mapping[str, Optional[str]]] = None
    ):
        """
        Initialize provider.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            overrides: Explicit values that win over the environment,
                keyed by CRMConfig field name. None values are ignored.
        """
        self._environ = os.environ if environ is None else environ
        self._overrides = {k: v for k, v in (overrides or {}).items() if v is not None}

    def _get(self, name: str, env_var: str) -> str:
        if name in self._overrides:
            return self._overrides[name]
        return self._environ.get(env_var, "")

    def get_crm_config(self) -> CRMConfig:
        """Get SuiteCRM configuration from environment variables."""
        base_url = self._get("base_url", "SUITECRM_BASE_URL")

        # Base URL is required - there is no sensible default instance
        if not base_url:
            raise ValueError(
                "SUITECRM_BASE_URL environment variable is required. "
                "Example: http://localhost/SuiteCRM/public/Api/"
            )

        return CRMConfig(
            base_url=base_url,
            client_id=self._get("client_id", "SUITECRM_CLIENT_ID"),
            client_secret=self._get("client_secret", "SUITECRM_CLIENT_SECRET"),
            username=self._get("username", "SUITECRM_USERNAME"),
            password=self._get("password", "SUITECRM_PASSWORD"),
        )
