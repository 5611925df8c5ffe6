"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_REPORT_TYPE, REPORT_TYPES
from src.infrastructure.logging.logger import get_app_logger


_LAUDUS_ENV_VARS = (
    "LAUDUS_API_URL",
    "LAUDUS_USERNAME",
    "LAUDUS_PASSWORD",
    "LAUDUS_COMPANY_VAT",
)


@dataclass(frozen=True)
class LaudusSettings:
    """Credentials and endpoint of the Laudus ERP API.

    Attributes:
        api_url: Base URL of the API, without trailing slash.
        username: API user name.
        password: API password.
        company_vat: VAT id of the company whose books are read.
    """

    api_url: str
    username: str
    password: str
    company_vat: str

    @classmethod
    def from_env(cls) -> "LaudusSettings":
        """Build settings from environment variables.

        Returns:
            LaudusSettings: Settings sourced from environment variables.

        Raises:
            RuntimeError: If any LAUDUS_* variable is missing.
        """
        dotenv.load_dotenv()
        values = {
            name: os.getenv(name, "").strip() for name in _LAUDUS_ENV_VARS
        }
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise RuntimeError(
                f"Missing environment variables: {', '.join(missing)}"
            )
        return cls(
            api_url=values["LAUDUS_API_URL"].rstrip("/"),
            username=values["LAUDUS_USERNAME"],
            password=values["LAUDUS_PASSWORD"],
            company_vat=values["LAUDUS_COMPANY_VAT"],
        )


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the dashboard read side.

    Attributes:
        report_type: Report type the statements are derived from.
    """

    report_type: str = DEFAULT_REPORT_TYPE

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Unknown report types fall back to the default with a warning.
        """
        dotenv.load_dotenv()
        report_type = os.getenv("BALANCE_REPORT_TYPE", DEFAULT_REPORT_TYPE)
        report_type = report_type.strip()
        if report_type not in REPORT_TYPES:
            get_app_logger().warning(
                f"Unsupported BALANCE_REPORT_TYPE '{report_type}', "
                f"using {DEFAULT_REPORT_TYPE}"
            )
            report_type = DEFAULT_REPORT_TYPE
        return cls(report_type=report_type)


__all__ = ["LaudusSettings", "DashboardSettings"]
