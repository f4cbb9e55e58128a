"""
analytics.py — Admin Dashboard Figures
---------------------------------------

Summarizes reports and users for the admin overview:

* Totals for reports and registered users
* Reports per status, always in the fixed order Pending, Invalid,
  Updated, Ranger Assigned (zero counts included)
* Top 10 animal labels by report count
* The five most recent reports

Inputs are lists of ORM objects (or dicts) as returned by `core.reports`,
newest first. Counting is done with pandas.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

import pandas as pd

from core.reports import STATUS_LABELS

STATUS_COLORS = {
    "pending": "#FFB000",
    "invalid": "#EF4444",
    "updated": "#3B82F6",
    "ranger_assigned": "#10B981",
}

TOP_ANIMALS = 10
RECENT_ACTIVITY = 5


@dataclass
class AnalyticsData:
    total_reports: int
    total_users: int
    reports_by_status: List[Dict[str, Any]] = field(default_factory=list)
    reports_by_animal: List[Dict[str, Any]] = field(default_factory=list)
    recent_activity: List[Any] = field(default_factory=list)

    def status_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.reports_by_status, columns=["status", "name", "value", "color"])

    def animal_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.reports_by_animal, columns=["name", "count"])


def _as_dict(item) -> dict:
    if isinstance(item, dict):
        return item
    return item.to_dict()


def reports_frame(reports) -> pd.DataFrame:
    """One row per report with the columns the dashboards show."""
    columns = ["id", "animal_type", "status", "latitude", "longitude", "feedback", "created_at", "user_id"]
    rows = [_as_dict(r) for r in reports]
    return pd.DataFrame(rows, columns=columns) if rows else pd.DataFrame(columns=columns)


def generate_analytics(reports, users) -> AnalyticsData:
    reports = list(reports)
    df = reports_frame(reports)

    status_counts = df["status"].value_counts()
    reports_by_status = [
        {
            "status": status,
            "name": label,
            "value": int(status_counts.get(status, 0)),
            "color": STATUS_COLORS[status],
        }
        for status, label in STATUS_LABELS.items()
    ]

    # Stable sort keeps first-seen order among animals with equal counts
    animal_counts = (
        df.groupby("animal_type", sort=False).size()
        .sort_values(ascending=False, kind="stable")
        .head(TOP_ANIMALS)
    )
    reports_by_animal = [{"name": name, "count": int(count)} for name, count in animal_counts.items()]

    return AnalyticsData(
        total_reports=len(df),
        total_users=len(list(users)),
        reports_by_status=reports_by_status,
        reports_by_animal=reports_by_animal,
        recent_activity=reports[:RECENT_ACTIVITY],
    )
