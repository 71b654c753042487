"""Runtime configuration: env-driven via pydantic-settings.

Reads from a .env file and ARC19_* environment variables.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkEndpoints(BaseModel):
    """Indexer endpoint for one Algorand network."""

    model_config = ConfigDict(frozen=True)

    name: str
    indexer_url: str
    indexer_token: str = ""


NETWORKS: dict[str, NetworkEndpoints] = {
    "mainnet": NetworkEndpoints(
        name="mainnet", indexer_url="https://mainnet-idx.algonode.cloud"
    ),
    "testnet": NetworkEndpoints(
        name="testnet", indexer_url="https://testnet-idx.algonode.cloud"
    ),
    "localnet": NetworkEndpoints(
        name="localnet",
        indexer_url="http://localhost:8980",
        indexer_token="a" * 64,
    ),
}

DEFAULT_IPFS_GATEWAY = "https://ipfs.io/ipfs/"


class Arc19Settings(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export ARC19_NETWORK=testnet
        export ARC19_IPFS_GATEWAY=https://gateway.pinata.cloud/ipfs/
        export ARC19_HTTP_TIMEOUT_SECONDS=5
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ARC19_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    network: str = "mainnet"
    indexer_url: str = ""  # overrides the network's default endpoint
    indexer_token: str = ""

    ipfs_gateway: str = DEFAULT_IPFS_GATEWAY

    # HTTP behaviour; no retries unless asked for
    http_timeout_seconds: float = 10.0
    http_max_retries: int = 0

    history_max_workers: int = 1

    log_level: str = "WARNING"

    @property
    def endpoints(self) -> NetworkEndpoints:
        try:
            return NETWORKS[self.network]
        except KeyError:
            raise ValueError(
                f"Unknown network {self.network!r}; expected one of {sorted(NETWORKS)}"
            ) from None

    @property
    def resolved_indexer_url(self) -> str:
        """Explicit ``indexer_url`` if set, otherwise the network default."""
        return (self.indexer_url or self.endpoints.indexer_url).rstrip("/")

    @property
    def resolved_indexer_token(self) -> str:
        return self.indexer_token or self.endpoints.indexer_token


# Module-level singleton: import as `from arc19.config import settings`
settings = Arc19Settings()
