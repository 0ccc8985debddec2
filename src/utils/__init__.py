"""
Utility modules for the payment integration
"""
from .config_loader import ZarinpalSettings, load_zarinpal_config, build_service_config

__all__ = [
    'ZarinpalSettings',
    'load_zarinpal_config',
    'build_service_config',
]
