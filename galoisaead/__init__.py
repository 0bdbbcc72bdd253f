"""AES-GCM authenticated encryption (gcm) built on a GHASH implementation (ghash)."""

__version__ = "0.1.0"
__all__ = ["gcm", "ghash"]