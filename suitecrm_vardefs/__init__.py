"""
SuiteCRM Vardefs - field definition exporter for the SuiteCRM V8 API

Authenticates with the OAuth2 password grant, lists the modules exposed by
the CRM and collects the vardefs of each one into a single JSON document.

Architecture:
- Each module is self-contained with clear interfaces
- Configuration is built once at startup and passed explicitly
- Failures are returned as result objects, never raised across modules

Modules:
- http: Single-request HTTP transport
- auth: Access token acquisition
- meta: Module listing and vardef retrieval
"""

__version__ = "1.0.0"
