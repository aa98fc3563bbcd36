"""HTTP façade."""

from monolite.infrastructure.http.client import DEFAULT_TIMEOUT, HttpClient, build_url

__all__ = ["HttpClient", "build_url", "DEFAULT_TIMEOUT"]
