# /portal/services/attendance_helpers/aggregates.py

from typing import Any, Dict, Iterable

import pandas as pd

STATUSES = ("present", "late", "absent")


def _status_of(record: Any) -> str:
    status = record["status"] if isinstance(record, dict) else record.status
    return getattr(status, "value", status)


def summarize_attendance(records: Iterable[Any]) -> Dict[str, Any]:
    """
    Counts each status and computes the attendance rate. Late counts as
    attended for the rate but keeps its own counter. No records -> rate 0.0.
    """
    statuses = pd.Series([_status_of(r) for r in records], dtype="object")
    counts = statuses.value_counts()
    summary = {status: int(counts.get(status, 0)) for status in STATUSES}
    total = int(len(statuses))
    attended = summary["present"] + summary["late"]
    summary["total"] = total
    summary["rate"] = (attended / total) * 100 if total else 0.0
    return summary
