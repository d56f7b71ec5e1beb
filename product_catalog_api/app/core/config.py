"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no environment at all and listens on port 3000.
Relative file paths are resolved against the project root by
``resolve_path``.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Directory containing the ``product_catalog_api`` package.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # JSON document holding the whole product collection.
    data_file: str = os.getenv("DATA_FILE", "data/full-products.json")

    # Directory served as static assets; ``index.html`` inside it is the
    # entry page returned for ``GET /``.
    public_dir: str = os.getenv("PUBLIC_DIR", "public")

    @property
    def data_path(self) -> Path:
        return resolve_path(self.data_file)

    @property
    def public_path(self) -> Path:
        return resolve_path(self.public_dir)


def resolve_path(value: str) -> Path:
    """Return ``value`` as an absolute path.

    Absolute paths are returned unchanged; relative ones are resolved
    against the project root rather than the working directory.
    """
    path = Path(value)
    if path.is_absolute():
        return path
    return (PROJECT_ROOT / path).resolve()


# Default instance used when ``create_app`` is called without explicit
# settings.  Environment variables must be set before this module is
# imported.
settings = Settings()
