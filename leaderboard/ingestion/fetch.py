"""
Sheet Fetching

Downloads the published standings and setup CSVs and parses them.
Both documents are fetched concurrently; a refresh only succeeds when
both downloads and both parses succeed.
"""

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, Optional

import requests

from leaderboard.config import REQUEST_TIMEOUT_SECONDS, SETUP_URL_ENV, STANDINGS_URL_ENV, SheetConfig
from leaderboard.ingestion.csv_parser import DocumentKind, parse_setup_csv, parse_standings_csv
from leaderboard.ingestion.errors import ConfigurationError, FetchError
from leaderboard.models import PlayerRecord, PrizePool, Snapshot
from leaderboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

URL_SETTINGS = {
    DocumentKind.STANDINGS: STANDINGS_URL_ENV,
    DocumentKind.SETUP: SETUP_URL_ENV,
}

FetchAll = Callable[[SheetConfig], Snapshot]


def fetch_csv(
    url: Optional[str],
    kind: DocumentKind,
    *,
    session: Optional[requests.Session] = None,
    timeout: int = REQUEST_TIMEOUT_SECONDS,
) -> str:
    """
    Download one CSV document as text.

    Args:
        url: Published CSV link
        kind: Which document is being fetched (used in messages)
        session: Optional requests session (default: module-level requests.get)
        timeout: Request timeout in seconds

    Returns:
        Response body decoded as UTF-8 text

    Raises:
        ConfigurationError: If no URL is configured
        FetchError: On a non-success status or a transport failure
    """
    kind = DocumentKind(kind)
    if not url or not url.strip():
        raise ConfigurationError(f"Missing {URL_SETTINGS[kind]} in configuration")

    getter = session.get if session is not None else requests.get
    try:
        response = getter(url, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch {kind.value}: {e}", kind=kind.value) from e

    if not response.ok:
        raise FetchError(
            f"Failed to fetch {kind.value}: {response.status_code} {response.reason}",
            status_code=response.status_code,
            kind=kind.value,
        )

    logger.debug(f"Fetched {kind.value} CSV ({len(response.content)} bytes, status {response.status_code})")
    return response.content.decode("utf-8", errors="replace")


def fetch_standings(config: SheetConfig, *, session: Optional[requests.Session] = None) -> tuple[PlayerRecord, ...]:
    """Fetch and parse the standings document."""
    text = fetch_csv(config.standings_url, DocumentKind.STANDINGS, session=session)
    return parse_standings_csv(text)


def fetch_setup(config: SheetConfig, *, session: Optional[requests.Session] = None) -> PrizePool:
    """Fetch and parse the setup (prize) document."""
    text = fetch_csv(config.setup_url, DocumentKind.SETUP, session=session)
    return parse_setup_csv(text)


def fetch_all(config: SheetConfig, *, session: Optional[requests.Session] = None) -> Snapshot:
    """
    Fetch both documents concurrently.

    Returns once both have finished, or as soon as either one fails; the
    whole operation then fails. The standings error is reported first when
    both have failed by that time.

    Args:
        config: Source URLs
        session: Optional requests session shared by both fetches

    Returns:
        Snapshot with the parsed records and prize pool

    Raises:
        IngestionError: Any configuration, fetch or parse failure
    """
    executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="sheet-fetch")
    try:
        standings_future = executor.submit(fetch_standings, config, session=session)
        setup_future = executor.submit(fetch_setup, config, session=session)

        done, _ = wait([standings_future, setup_future], return_when=FIRST_EXCEPTION)
        for future in (standings_future, setup_future):
            if future in done and future.exception() is not None:
                raise future.exception()

        records = standings_future.result()
        prizes = setup_future.result()
    finally:
        # A still-running fetch is left to finish on its own (bounded by the request timeout)
        executor.shutdown(wait=False)

    logger.info(f"Fetched {len(records)} players, prize pool {prizes.total:.2f}")
    return Snapshot(records=records, prizes=prizes)
