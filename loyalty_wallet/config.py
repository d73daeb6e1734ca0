"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the wallet works with no environment at all
    - Environment variables use the WALLET_ prefix (e.g. WALLET_BARCODE_SIZE=256)
    - get_settings() is cached (lru_cache), one instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from loyalty_wallet.core.card import DISPLAY_DATE_FORMAT
from loyalty_wallet.core.domain_types import QRErrorCorrection


class Settings(BaseSettings):
    """Wallet settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WALLET_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Barcode rendering: side length in modules of every encoded matrix
    barcode_size: int = Field(512, ge=1)
    qr_error_correction: QRErrorCorrection = QRErrorCorrection.L
    qr_quiet_zone: int = Field(4, ge=0)
    ean_quiet_zone: int = Field(9, ge=0)

    # Display
    display_date_format: str = DISPLAY_DATE_FORMAT

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("qr_error_correction", mode="before")
    @classmethod
    def upper_ec_level(cls, v: object) -> object:
        """Accept lowercase levels from the environment (l, m, q, h)."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
