"""
Normalization of Alpha Vantage intraday payloads.

Turns the provider's string-keyed, string-valued JSON into a
:class:`TimeSeriesModel`. Two failure channels are kept apart:

* structural faults (a missing member, a member of the wrong type) abort the
  whole parse; :func:`parse` then returns ``None`` and nothing built so far is
  kept;
* per-field coercion faults never abort: an unparsable number becomes NaN and
  an unparsable timestamp becomes ``None`` while the raw text is preserved.

Series entries keep the provider's key order. Alpha Vantage emits newest
first; callers needing chronological order use
:func:`quoteview.core.projector.sort_chronologically`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from quoteview.core.exceptions import PayloadShapeError
from quoteview.core.logging import get_logger
from quoteview.core.models import Metadata, OHLCVRecord, SeriesEntry, TimeSeriesModel

logger = get_logger(__name__)

DEFAULT_INTERVAL = "5min"
METADATA_KEY = "Meta Data"

METADATA_FIELDS = {
    "information": "1. Information",
    "symbol": "2. Symbol",
    "last_refreshed": "3. Last Refreshed",
    "interval": "4. Interval",
    "output_size": "5. Output Size",
    "time_zone": "6. Time Zone",
}

OHLCV_FIELDS = {
    "open": "1. open",
    "high": "2. high",
    "low": "3. low",
    "close": "4. close",
    "volume": "5. volume",
}

TIMESTAMP_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M", "%Y-%m-%d")


def series_key(interval: str = DEFAULT_INTERVAL) -> str:
    """Return the top-level member holding the series for ``interval``."""
    return f"Time Series ({interval})"


def coerce_number(text: str) -> float:
    """Convert provider text to a float, NaN when it is not a number.

    Only decimal notation and the exact spelling ``Infinity`` are numbers;
    digit separators (``1_000``) and spellings such as ``nan`` or ``inf`` are not.
    """
    candidate = text.strip()
    unsigned = candidate[1:] if candidate[:1] in ("+", "-") else candidate
    if "_" in candidate or (unsigned.isalpha() and unsigned != "Infinity"):
        return math.nan
    try:
        return float(candidate)
    except ValueError:
        return math.nan


def coerce_timestamp(text: str) -> datetime | None:
    """Best-effort conversion of a provider timestamp key.

    Provider keys carry no UTC offset, so results are naive datetimes in the
    provider's reported time zone; an explicit offset, if present, is dropped.
    Returns ``None`` for unparsable text.
    """
    candidate = text.strip()
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(candidate, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(candidate).replace(tzinfo=None)
    except ValueError:
        return None


def _member(container: Any, key: str, path: str) -> Any:
    if not isinstance(container, Mapping):
        raise PayloadShapeError(f"Expected an object at '{path}'", path=path)
    try:
        return container[key]
    except KeyError:
        raise PayloadShapeError(f"Missing member '{key}' at '{path}'", path=f"{path}/{key}") from None


def _text(container: Any, key: str, path: str) -> str:
    value = _member(container, key, path)
    if not isinstance(value, str):
        raise PayloadShapeError(
            f"Expected text for '{key}' at '{path}', got {type(value).__name__}",
            path=f"{path}/{key}",
        )
    return value


def _build_metadata(raw_metadata: Any) -> Metadata:
    path = f"/{METADATA_KEY}"
    values = {name: _text(raw_metadata, key, path) for name, key in METADATA_FIELDS.items()}
    return Metadata(**values)


def _build_record(raw_values: Any, path: str) -> OHLCVRecord:
    texts = {name: _text(raw_values, key, path) for name, key in OHLCV_FIELDS.items()}
    fields: dict[str, Any] = {f"{name}_str": text for name, text in texts.items()}
    fields.update({name: coerce_number(text) for name, text in texts.items()})
    return OHLCVRecord(**fields)


def _build_series(raw_series: Any, key: str) -> tuple[SeriesEntry, ...]:
    path = f"/{key}"
    if not isinstance(raw_series, Mapping):
        raise PayloadShapeError(f"Expected an object at '{path}'", path=path)

    entries = []
    for time_str, raw_values in raw_series.items():
        if not isinstance(time_str, str):
            raise PayloadShapeError(f"Expected text keys at '{path}'", path=path)
        entries.append(
            SeriesEntry(
                time_str=time_str,
                time=coerce_timestamp(time_str),
                data=_build_record(raw_values, f"{path}/{time_str}"),
            )
        )
    return tuple(entries)


def parse_or_raise(raw: Any, interval: str = DEFAULT_INTERVAL) -> TimeSeriesModel:
    """Build a :class:`TimeSeriesModel` or raise :class:`PayloadShapeError`.

    Args:
        raw: decoded JSON payload
        interval: interval the payload was requested with, selects the series member

    Raises:
        PayloadShapeError: the payload misses a member or a member has the wrong type
    """
    key = series_key(interval)
    raw_metadata = _member(raw, METADATA_KEY, "")
    raw_series = _member(raw, key, "")

    metadata = _build_metadata(raw_metadata)
    series = _build_series(raw_series, key)
    return TimeSeriesModel(metadata=metadata, series=series)


def parse(raw: Any, interval: str = DEFAULT_INTERVAL) -> TimeSeriesModel | None:
    """Build a :class:`TimeSeriesModel`, or return ``None`` on any structural fault.

    Never returns a partially populated model.
    """
    try:
        return parse_or_raise(raw, interval)
    except PayloadShapeError as exc:
        logger.debug("Intraday payload rejected: {}", exc.message, error_code=exc.error_code, path=exc.path)
        return None


__all__ = [
    "DEFAULT_INTERVAL",
    "METADATA_KEY",
    "coerce_number",
    "coerce_timestamp",
    "parse",
    "parse_or_raise",
    "series_key",
]
