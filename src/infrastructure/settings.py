"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from datetime import date
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger


SUPPORTED_STORES = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class AssetHubSettings:
    """Runtime settings for the asset tracker.

    Attributes:
        store: Document store backend (sqlalchemy or memory).
        user_id: Signed-in user id, None when nobody is signed in.
        notice_seconds: Lifetime of success notices.
        trend_year: Calendar year tracked by the trend table.
    """

    store: str = "sqlalchemy"
    user_id: str | None = None
    notice_seconds: float = 3.0
    trend_year: int = field(default_factory=lambda: date.today().year)

    @classmethod
    def from_env(cls) -> "AssetHubSettings":
        """Build settings from environment variables (and a .env file).

        Returns:
            AssetHubSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        store = os.getenv("ASSET_HUB_STORE", "sqlalchemy").strip().lower()
        if store not in SUPPORTED_STORES:
            raise ValueError(
                f"Unsupported document store: {store}. "
                f"Expected one of {', '.join(SUPPORTED_STORES)}."
            )
        user_id = os.getenv("ASSET_HUB_USER_ID", "").strip() or None
        return cls(
            store=store,
            user_id=user_id,
            notice_seconds=cls._parse_float(
                os.getenv("ASSET_HUB_NOTICE_SECONDS"),
                default=3.0,
                name="ASSET_HUB_NOTICE_SECONDS",
                logger=logger,
            ),
            trend_year=int(
                cls._parse_float(
                    os.getenv("TREND_YEAR"),
                    default=date.today().year,
                    name="TREND_YEAR",
                    logger=logger,
                )
            ),
        )

    @staticmethod
    def _parse_float(raw: str | None, default: float, name: str, logger) -> float:
        """Parse a numeric variable, falling back to ``default`` on errors."""
        if raw is None or not raw.strip():
            return default
        try:
            return float(raw)
        except ValueError:
            logger.warning(f"Invalid value for {name}: {raw!r}; using {default}")
            return default


__all__ = ["AssetHubSettings", "SUPPORTED_STORES"]
