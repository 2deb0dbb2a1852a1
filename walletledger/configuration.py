"""Mini README: Centralised configuration for WalletLedger.

Structure:
    * WalletSettings - Pydantic settings model describing where the ledger lives.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Call ``get_settings()`` from entry points. Values come from
    ``WALLETLEDGER_*`` environment variables or a local ``.env`` file, and are
    validated once per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WalletSettings(BaseSettings):
    """Runtime configuration for the wallet tracker."""

    model_config = SettingsConfigDict(
        env_prefix="WALLETLEDGER_",
        env_file=".env",
        case_sensitive=False,
    )

    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the persisted ledger file.",
        validate_default=True,
    )
    ledger_filename: str = Field(
        "transaction.json",
        description="File name of the JSON ledger inside ``data_directory``.",
        min_length=1,
    )
    currency_symbol: str = Field(
        "₺",
        description="Symbol appended to formatted amounts.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level used by the command line entry point.",
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def ledger_path(self) -> Path:
        return self.data_directory / self.ledger_filename


@lru_cache()
def get_settings() -> WalletSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return WalletSettings()
