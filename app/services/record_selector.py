import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from dateutil import parser as date_parser

from app.exceptions import NotFound
from app.models.enums import NodeKind
from app.schemas.satellite_nft import SatelliteRecord
from app.services.telemetry_client import TelemetryClient

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = ("temperature", "humidity", "light", "air_quality")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def classify(node: Any) -> NodeKind:
    """Tag a JSON node as a telemetry record, a container to descend into, or noise."""
    if isinstance(node, dict):
        ts = node.get("timestamp")
        if isinstance(ts, str) and ts and all(_is_number(node.get(f)) for f in NUMERIC_FIELDS):
            return NodeKind.RECORD
        return NodeKind.BRANCH
    if isinstance(node, list):
        return NodeKind.BRANCH
    return NodeKind.SKIP


def collect_records(node: Any, out: Optional[List[SatelliteRecord]] = None) -> List[SatelliteRecord]:
    if out is None:
        out = []

    kind = classify(node)
    if kind == NodeKind.RECORD:
        out.append(SatelliteRecord(
            timestamp=node["timestamp"],
            **{f: node[f] for f in NUMERIC_FIELDS},
        ))
    elif kind == NodeKind.BRANCH:
        children = node.values() if isinstance(node, dict) else node
        for child in children:
            collect_records(child, out)
    return out


def parse_timestamp(value: str) -> datetime:
    """Parse ISO-8601, RFC 2822, slash-separated and similar forms. Naive values are UTC."""
    try:
        dt = date_parser.parse(value)
    except OverflowError as e:
        raise ValueError(f"Timestamp out of range: {value!r}") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def pick_latest(records: List[SatelliteRecord]) -> SatelliteRecord:
    try:
        keyed = [(parse_timestamp(r.timestamp), r) for r in records]
    except ValueError as e:
        logger.warning("Unparseable timestamp (%s), falling back to last record", e)
        return records[-1]

    # sorted() is stable, so equal timestamps keep traversal order and the later one wins
    keyed = sorted(keyed, key=lambda pair: pair[0])
    return keyed[-1][1]


def select_latest(tree: Any) -> SatelliteRecord:
    if tree is None:
        raise NotFound("No data found in telemetry store")

    records = collect_records(tree)
    if not records:
        raise NotFound("No valid satellite records found")

    logger.debug("Found %d satellite records", len(records))
    return pick_latest(records)


class RecordSelector:
    def __init__(self, client: TelemetryClient):
        self.client = client

    def latest(self) -> SatelliteRecord:
        return select_latest(self.client.fetch_tree())
