"""Configuration models (Pydantic classes)."""

from enum import Enum
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, model_validator

from infrastructure.constants import DEFAULT_COLLECTION, DEFAULT_DATABASE, DEFAULT_HOST, DEFAULT_PORT


class StoreBackend(str, Enum):
    """Supported record store backends."""

    MONGO = "mongo"
    MEMORY = "memory"


class TextFormat(str, Enum):
    """Text encodings of the editable taxonomy document."""

    TOML = "toml"
    JSON = "json"


class StoreConfig(BaseModel):
    """
    Record store configuration.
    - Loaded from configs/store.yaml (optional)
    - Overridden by environment variables, then by CLI flags
    - Consumed by the store factory and the CLI
    """

    backend: StoreBackend = Field(default=StoreBackend.MONGO, description="Record store backend to use.")
    host: str = Field(default=DEFAULT_HOST, description="MongoDB host to connect to.")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="MongoDB server port.")
    uri: str | None = Field(
        default=None,
        description="Full MongoDB connection string. Takes precedence over host/port when set.",
    )
    database: str = Field(default=DEFAULT_DATABASE, description="Database holding the taxonomy collection.")
    collection: str = Field(default=DEFAULT_COLLECTION, description="Collection holding the taxonomy records.")
    format: TextFormat = Field(default=TextFormat.TOML, description="Default text encoding for load/store.")
    server_selection_timeout_ms: int = Field(default=5000, gt=0)

    @model_validator(mode="after")
    def _validate(self) -> "StoreConfig":
        self.host = self.host.strip()
        self.database = self.database.strip()
        self.collection = self.collection.strip()
        if self.uri is not None and not self.uri.strip():
            self.uri = None

        if not self.host:
            raise ValueError("host must not be empty")
        if not self.database:
            raise ValueError("database must not be empty")
        if not self.collection:
            raise ValueError("collection must not be empty")
        return self

    @property
    def connection_uri(self) -> str:
        return self.uri or f"mongodb://{self.host}:{self.port}"

    @property
    def server(self) -> str:
        """Host list of the server being contacted, without credentials."""
        if self.uri:
            return urlsplit(self.uri).netloc.rpartition("@")[2]
        return f"{self.host}:{self.port}"

    @property
    def target(self) -> str:
        """Short human-readable location used in log lines and errors."""
        if self.backend is StoreBackend.MEMORY:
            return f"memory:{self.collection}"
        return f"{self.server}/{self.database}.{self.collection}"
