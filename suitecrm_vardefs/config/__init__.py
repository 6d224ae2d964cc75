"""Configuration for the SuiteCRM vardefs exporter."""

from .provider import ConfigProvider, CRMConfig, EnvConfigProvider

__all__ = ["ConfigProvider", "CRMConfig", "EnvConfigProvider"]
