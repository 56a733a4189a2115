# ==============================================================================
# Clickstream Log Reader
# ==============================================================================
"""
Reads visit events from a delimited clickstream log file.

Record layout (no header, ';'-separated by default):

    timestamp;session-id;screen-path

- Empty lines and lines starting with the comment prefix are ignored
- Every other line must hold exactly three fields; any of them may be empty
- timestamp is a real number, truncated to an integer
- session-id is trimmed
- screen-path has every occurrence of the screen prefix removed, then is trimmed

Records are split and validated with Polars expressions. Any malformed record
aborts the whole read; no record is skipped.
"""

import logging
from pathlib import Path

import polars as pl

from clickgraph.core.models import VisitEvent

logger = logging.getLogger(__name__)

_COLUMNS = ("timestamp", "session_id", "screen_path")


class ClickgraphError(Exception):
    """Base class for fatal clickgraph errors."""


class LogReadError(ClickgraphError):
    """The log file is missing or unreadable."""


class LogParseError(ClickgraphError):
    """A log record has the wrong number of fields or a bad timestamp."""


def _load_frame(path: Path, separator: str, comment_prefix: str) -> pl.DataFrame:
    """Load the records as three string columns, dropping blank and comment lines."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LogReadError(f"Error opening file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise LogParseError(f"Error reading csv record from file {path}: {e}") from e

    records = pl.DataFrame({"record": text.splitlines()}, schema={"record": pl.Utf8})
    records = records.filter(pl.col("record") != "")
    if comment_prefix:
        records = records.filter(~pl.col("record").str.starts_with(comment_prefix))

    records = records.with_columns(pl.col("record").str.split(separator).alias("fields"))
    ragged = records.filter(pl.col("fields").list.len() != len(_COLUMNS))
    if ragged.height:
        record, fields = ragged.row(0)
        raise LogParseError(
            f"Error reading csv record from file {path}: "
            f"record '{record}' has {len(fields)} fields (expected {len(_COLUMNS)})"
        )

    return records.select(
        [pl.col("fields").list.get(i).alias(name) for i, name in enumerate(_COLUMNS)]
    )


def read_visit_events(
    path: Path | str,
    separator: str = ";",
    comment_prefix: str = "#",
    screen_prefix: str = "/ca/ca",
) -> list[VisitEvent]:
    """
    Read all visit events from a log file.

    Args:
        path: Path to the log file
        separator: Field separator
        comment_prefix: Prefix marking comment lines
        screen_prefix: Literal substring removed from every screen path

    Returns:
        Visit events in file order

    Raises:
        LogReadError: If the file is missing or unreadable
        LogParseError: If a record is malformed
    """
    path = Path(path)
    logger.info("Reading visit events from %s", path)
    df = _load_frame(path, separator, comment_prefix)

    df = df.with_columns(
        pl.col("timestamp").str.strip_chars().cast(pl.Float64, strict=False).alias("parsed_time")
    )
    bad_times = df.filter(~pl.col("parsed_time").is_finite().fill_null(False))
    if bad_times.height:
        raise LogParseError(
            f"Error parsing time in file {path}: '{bad_times['timestamp'][0]}' is not a number"
        )

    screen = pl.col("screen_path")
    if screen_prefix:
        screen = screen.str.replace_all(screen_prefix, "", literal=True)

    df = df.select(
        pl.col("parsed_time").cast(pl.Int64).alias("timestamp"),
        pl.col("session_id").str.strip_chars().alias("session_id"),
        screen.str.strip_chars().alias("screen_name"),
    )

    events = [VisitEvent(**row) for row in df.iter_rows(named=True)]
    logger.info("Read %d visit events from %s", len(events), path)
    return events
