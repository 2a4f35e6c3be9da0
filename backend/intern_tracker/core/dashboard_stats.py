"""Dashboard Stats — pure aggregation of intern records into dashboard metrics.

Invariants:
    - All inputs are record dicts plus an explicit now (no IO, no clock reads)
    - Returns {metrics, trends, insights}, JSON-serializable
    - Never raises on missing fields — absent values are skipped, counts default to 0
    - interviewsScheduled is an external input; no interview entity exists

Design Decisions:
    - "Hired" means status Active or Completed with statusChangedAt inside the window;
      records without statusChangedAt are never counted as hired
    - Trends are recomputed from createdAt/statusChangedAt on every call: the store
      keeps no snapshots
"""

from collections import Counter
from datetime import datetime, timedelta

from intern_tracker.core.domain_types import (
    Department, InternStatus, HIRED_STATUSES, TOP_SKILLS_LIMIT,
)
from intern_tracker.core.timestamps import as_utc, parse_timestamp


def compute_dashboard_stats(
    records: list[dict], now: datetime, interviews_scheduled: int = 0,
) -> dict:
    """Compute dashboard metrics, trends and insights. Pure, no IO."""
    now = as_utc(now)
    # windows ending "now" include records stamped at exactly now
    until_now = now + timedelta(microseconds=1)
    month_start, prev_month_start = _month_bounds(now)

    hired_this_month = count_hired_between(records, month_start, until_now)
    hired_last_month = count_hired_between(records, prev_month_start, month_start)
    this_week = count_created_between(records, now - timedelta(days=7), until_now)
    last_week = count_created_between(
        records, now - timedelta(days=14), now - timedelta(days=7),
    )
    by_status = _count_by(records, "status", [s.value for s in InternStatus])

    return {
        "metrics": {
            "totalInterns": len(records),
            "activeApplications": by_status[InternStatus.PENDING.value],
            "interviewsScheduled": interviews_scheduled,
            "hiredThisMonth": hired_this_month,
            "activeInterns": by_status[InternStatus.ACTIVE.value],
            "completedInterns": by_status[InternStatus.COMPLETED.value],
        },
        "trends": {
            "applicationsThisWeek": this_week,
            "applicationsLastWeek": last_week,
            "hiredLastMonth": hired_last_month,
            "growth": {
                "applicationsChange": this_week - last_week,
                "hiredChange": hired_this_month - hired_last_month,
            },
        },
        "insights": {
            "averageGPA": average_gpa(records),
            "departmentBreakdown": _count_by(
                records, "department", [d.value for d in Department],
            ),
            "statusBreakdown": by_status,
            "topSkills": top_skills(records),
        },
    }


def average_gpa(records: list[dict]) -> float:
    """Mean of present gpas, 0.0 when none has one."""
    gpas = [
        r["gpa"] for r in records
        if isinstance(r.get("gpa"), (int, float)) and not isinstance(r.get("gpa"), bool)
    ]
    if not gpas:
        return 0.0
    return round(sum(gpas) / len(gpas), 3)


def count_hired_between(records: list[dict], start: datetime, end: datetime) -> int:
    return sum(
        1 for r in records
        if r.get("status") in HIRED_STATUSES
        and _within(parse_timestamp(r.get("statusChangedAt")), start, end)
    )


def count_created_between(records: list[dict], start: datetime, end: datetime) -> int:
    return sum(
        1 for r in records if _within(parse_timestamp(r.get("createdAt")), start, end)
    )


def top_skills(records: list[dict], limit: int = TOP_SKILLS_LIMIT) -> list[dict]:
    """Most common skills, ties broken by name."""
    counts = Counter(
        skill for r in records for skill in (r.get("skills") or [])
        if isinstance(skill, str) and skill
    )
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0].lower()))
    return [{"skill": skill, "count": count} for skill, count in ranked[:limit]]


def _count_by(records: list[dict], field_name: str, keys: list[str]) -> dict[str, int]:
    counts = dict.fromkeys(keys, 0)
    for r in records:
        value = r.get(field_name)
        if value in counts:
            counts[value] += 1
    return counts


def _month_bounds(now: datetime) -> tuple[datetime, datetime]:
    month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    prev_month_start = (month_start - timedelta(days=1)).replace(day=1)
    return month_start, prev_month_start


def _within(moment: datetime | None, start: datetime, end: datetime) -> bool:
    """Half-open window [start, end)."""
    return moment is not None and start <= moment < end
