"""HTTP client for the Laudus ERP balance sheet reports."""

from datetime import date
from typing import Any

import requests

from src.application.ports.balance_source import BalanceSourcePort
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LaudusSettings


LOGIN_PATH = "/security/login"

REPORT_PATHS = {
    "totals": "/accounting/balanceSheet/totals",
    "standard": "/accounting/balanceSheet/standard",
    "8Columns": "/accounting/balanceSheet/8Columns",
}


class LaudusBalanceSource(BalanceSourcePort):
    """Balance source reading reports from the Laudus REST API."""

    def __init__(
        self,
        settings: LaudusSettings,
        session: requests.Session | None = None,
        logger=None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the client.

        Args:
            settings: API endpoint and credentials.
            session: Optional preconfigured requests session.
            logger: Optional logger compatible with logging.Logger-like API.
            timeout: Timeout in seconds for each HTTP request.
        """
        self._settings = settings
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )
        self._logger = logger or get_app_logger()
        self._timeout = timeout
        self._token: str | None = None

    @property
    def token(self) -> str | None:
        """Return the current bearer token, if authenticated."""
        return self._token

    def authenticate(self) -> str:
        """Log in and keep the bearer token for later requests.

        Returns:
            str: The bearer token.

        Raises:
            RuntimeError: If the login request fails.
        """
        url = f"{self._settings.api_url}{LOGIN_PATH}"
        try:
            response = self._session.post(
                url,
                json={
                    "userName": self._settings.username,
                    "password": self._settings.password,
                    "companyVATId": self._settings.company_vat,
                },
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RuntimeError(
                f"Laudus authentication failed: {exc}"
            ) from exc

        token = response.text.strip().strip('"')
        if not token:
            raise RuntimeError("Laudus authentication returned an empty token")
        self._token = token
        self._logger.info("Authenticated against the Laudus API")
        return token

    def fetch_balance_rows(
        self,
        report_type: str,
        date_to: date,
    ) -> list[dict[str, Any]]:
        """Return the raw rows of a balance sheet report.

        Args:
            report_type: One of totals, standard or 8Columns.
            date_to: Report date.

        Returns:
            list[dict[str, Any]]: Report rows as returned by the API.

        Raises:
            ValueError: If the report type is unknown.
            RuntimeError: If the request fails or the payload is not a list.
        """
        path = REPORT_PATHS.get(report_type)
        if path is None:
            raise ValueError(f"Unsupported report type: {report_type}")
        if self._token is None:
            self.authenticate()

        url = f"{self._settings.api_url}{path}"
        params = {
            "dateTo": date_to.isoformat(),
            "showAccountsWithZeroBalance": "true",
            "showOnlyAccountsWithActivity": "false",
        }
        try:
            response = self._session.get(
                url,
                params=params,
                headers={"Authorization": f"Bearer {self._token}"},
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise RuntimeError(
                f"Failed to fetch {report_type} for {date_to}: {exc}"
            ) from exc
        except ValueError as exc:
            raise RuntimeError(
                f"Invalid JSON in {report_type} response for {date_to}"
            ) from exc

        if not isinstance(payload, list):
            raise RuntimeError(
                f"Unexpected {report_type} payload type: "
                f"{type(payload).__name__}"
            )
        self._logger.info(
            f"Fetched {len(payload)} {report_type} rows for {date_to}"
        )
        return payload


__all__ = ["LaudusBalanceSource", "REPORT_PATHS", "LOGIN_PATH"]
