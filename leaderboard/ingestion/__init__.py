"""
Data Ingestion

Modules:
- csv_parser: Parse the standings and setup CSV documents
- fetch: Download both documents concurrently
- errors: Ingestion exception hierarchy
"""


def __getattr__(name):
    """Lazy imports so `requests` is only loaded when fetching is used."""
    if name in ("parse_csv_line", "parse_standings_csv", "parse_setup_csv", "parse_document", "DocumentKind"):
        from leaderboard.ingestion import csv_parser
        return getattr(csv_parser, name)
    if name in ("fetch_all", "fetch_csv", "fetch_standings", "fetch_setup"):
        from leaderboard.ingestion import fetch
        return getattr(fetch, name)
    if name in ("IngestionError", "ConfigurationError", "FetchError", "EmptyDocument"):
        from leaderboard.ingestion import errors
        return getattr(errors, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
