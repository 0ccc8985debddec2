"""
Configuration loader for the Zarinpal payment integration
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
import logging

from src.integrations.contracts.payments import WageCalculator, ZarinpalServiceConfig

logger = logging.getLogger(__name__)

_ENV_OVERRIDES = {
    "ZARINPAL_MERCHANT_ID": "merchant_id",
    "ZARINPAL_EXPIRE_IN": "expire_in",
    "ZARINPAL_TIMEOUT_SECONDS": "timeout_seconds",
}


class ZarinpalSettings(BaseModel):
    """Merchant account and transport settings"""

    merchant_id: str = Field(min_length=1)
    expire_in: Optional[int] = Field(default=None, ge=1)
    timeout_seconds: float = Field(default=20.0, gt=0)
    default_description: str = ""


def load_zarinpal_config(config_path: Optional[Path] = None) -> ZarinpalSettings:
    """
    Load and validate Zarinpal settings from YAML file plus environment

    Environment variables (also read from a .env file) override the YAML values.

    Args:
        config_path: Path to config file. Defaults to config/zarinpal_config.yml

    Returns:
        Validated ZarinpalSettings object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config" / "zarinpal_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data: Dict[str, Any] = yaml.safe_load(f) or {}

    load_dotenv()
    for env_key, field_name in _ENV_OVERRIDES.items():
        value = os.getenv(env_key)
        if value:
            config_data[field_name] = value

    try:
        settings = ZarinpalSettings(**config_data)
        logger.info(f"Successfully loaded config from {config_path}")
        return settings
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise


def build_service_config(
    settings: ZarinpalSettings,
    wage_calculator: Optional[WageCalculator] = None,
) -> ZarinpalServiceConfig:
    """Turn loaded settings into the immutable per-session configuration"""
    return ZarinpalServiceConfig(
        merchant_id=settings.merchant_id,
        wage_calculator=wage_calculator,
        expire_in=settings.expire_in,
    )
