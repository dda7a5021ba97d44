"""
Store configuration.

Secrets and endpoints are read once from Django settings and passed
around as an immutable object so nothing mutates them at runtime.
"""
import functools
from dataclasses import dataclass

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver


@dataclass(frozen=True)
class StoreSettings:
    """Read-only store configuration."""

    base_url: str
    payos_client_id: str
    payos_api_key: str
    payos_checksum_key: str
    payos_base_url: str
    payos_timeout_seconds: float
    admin_api_secret: str
    activation_require_device_id: bool
    payment_description: str

    @classmethod
    def from_django(cls) -> "StoreSettings":
        """Build settings from the active Django settings module."""
        return cls(
            base_url=getattr(settings, "STORE_BASE_URL", "http://localhost:8000").rstrip("/"),
            payos_client_id=getattr(settings, "PAYOS_CLIENT_ID", ""),
            payos_api_key=getattr(settings, "PAYOS_API_KEY", ""),
            payos_checksum_key=getattr(settings, "PAYOS_CHECKSUM_KEY", ""),
            payos_base_url=getattr(
                settings, "PAYOS_BASE_URL", "https://api-merchant.payos.vn"
            ).rstrip("/"),
            payos_timeout_seconds=float(getattr(settings, "PAYOS_TIMEOUT_SECONDS", 30)),
            admin_api_secret=getattr(settings, "ADMIN_API_SECRET", ""),
            activation_require_device_id=bool(
                getattr(settings, "ACTIVATION_REQUIRE_DEVICE_ID", False)
            ),
            payment_description=getattr(
                settings, "PAYMENT_DESCRIPTION", "Thanh toán đơn mua code"
            ),
        )


STORE_SETTING_NAMES = frozenset(
    {
        "STORE_BASE_URL",
        "PAYOS_CLIENT_ID",
        "PAYOS_API_KEY",
        "PAYOS_CHECKSUM_KEY",
        "PAYOS_BASE_URL",
        "PAYOS_TIMEOUT_SECONDS",
        "ADMIN_API_SECRET",
        "ACTIVATION_REQUIRE_DEVICE_ID",
        "PAYMENT_DESCRIPTION",
    }
)


@functools.lru_cache(maxsize=None)
def get_store_settings() -> StoreSettings:
    """
    Return the process-wide store settings.

    Built on first use (the app config warms it at startup) and reused
    afterwards.
    """
    return StoreSettings.from_django()


@receiver(setting_changed)
def _reset_store_settings(setting, **kwargs):
    if setting in STORE_SETTING_NAMES:
        get_store_settings.cache_clear()
