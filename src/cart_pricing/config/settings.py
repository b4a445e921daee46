"""
Centralized settings and path configuration for cart pricing.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


def get_package_data_dir() -> Path:
    """Directory holding the bundled reference CSV files."""
    return Path(__file__).resolve().parent.parent / 'data'


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Reference data location
    data_dir: Path

    # Reference data files
    products_csv: Path
    regions_csv: Path
    discounts_csv: Path

    # Presentation
    currency_label: str = "RUB"
    default_region: str = "MSK"

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    @classmethod
    def load(cls, data_dir: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure and environment."""
        data = data_dir or get_package_data_dir()

        return cls(
            data_dir=data,
            products_csv=data / 'products.csv',
            regions_csv=data / 'regions.csv',
            discounts_csv=data / 'discounts.csv',
            currency_label=os.environ.get('CART_PRICING_CURRENCY_LABEL', 'RUB'),
            default_region=os.environ.get('CART_PRICING_DEFAULT_REGION', 'MSK'),
            log_level=os.environ.get('CART_PRICING_LOG_LEVEL', 'INFO'),
            json_logs=os.environ.get('CART_PRICING_JSON_LOGS', '').lower() in ('1', 'true', 'yes'),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
