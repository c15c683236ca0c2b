import logging
from functools import lru_cache
from typing import Any
from urllib.parse import quote_plus

import requests

from ..config import Settings, get_settings
from ..schemas import ProviderResponse, UpstreamFailure, UpstreamResult

log = logging.getLogger(__name__)


class CalendarClient:
    """
    Thin client for the Calendarific API.

    One plain `requests.get` per call, no shared session or cookie jar.

    Never raises for upstream problems: transport errors, non-2xx statuses
    and non-JSON bodies come back as `UpstreamFailure`.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    def base_url(self) -> str:
        return self._settings.CALENDARIFIC_API_BASE_URL

    def fetch_countries(self) -> UpstreamResult:
        return self._get("countries", "/countries", {})

    def fetch_holidays(self, year: int, country: str) -> UpstreamResult:
        return self._get(
            "holidays",
            "/holidays",
            {"country": country, "year": year},
        )

    # -----------------------------------------------------------------------

    def _get(self, op: str, path: str, params: dict[str, Any]) -> UpstreamResult:
        url = f"{self.base_url}{path}"
        query = {"api_key": self._settings.CALENDARIFIC_API_KEY.get_secret_value()}
        query.update(params)

        try:
            resp = requests.get(
                url,
                params=query,
                timeout=self._settings.UPSTREAM_TIMEOUT_SECONDS,
            )
        except requests.RequestException as e:
            return self._fail(op, "network", f"{type(e).__name__}: {e}")

        if not 200 <= resp.status_code < 300:
            return self._fail(
                op,
                "status",
                f"HTTP {resp.status_code} {resp.reason or ''}".rstrip(),
                status_code=resp.status_code,
            )

        try:
            resp.json()
        except ValueError as e:
            return self._fail(
                op,
                "decode",
                f"invalid JSON body: {e}",
                status_code=resp.status_code,
            )

        log.debug(f"Calendarific {op}: {len(resp.content)} bytes")
        return ProviderResponse(body=resp.content)

    def _fail(
        self,
        op: str,
        reason: str,
        detail: str,
        status_code: int | None = None,
    ) -> UpstreamFailure:
        failure = UpstreamFailure(
            reason=reason,
            detail=self._redact(detail),
            status_code=status_code,
        )
        log.warning(f"Error fetching {op} ({failure.reason}): {failure.detail}")
        return failure

    def _redact(self, text: str) -> str:
        # requests errors embed the full URL, query string included
        key = self._settings.CALENDARIFIC_API_KEY.get_secret_value()
        if not key:
            return text
        for form in (key, quote_plus(key)):
            text = text.replace(form, "****")
        return text


@lru_cache
def get_calendar_client() -> CalendarClient:
    return CalendarClient(get_settings())
