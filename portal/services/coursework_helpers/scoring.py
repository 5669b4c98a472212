# /portal/services/coursework_helpers/scoring.py

from typing import Any, Iterable, Optional

import pandas as pd


def grade_percentage(grade: Optional[float], max_grade: Optional[float]) -> Optional[float]:
    """
    Straight division, not clamped: 110/100 is 110.0. Undefined (None) when
    there is no grade or the maximum is zero.
    """
    if grade is None or not max_grade:
        return None
    return float(grade) * 100 / float(max_grade)


def average_percentage(grades: Iterable[Any]) -> Optional[float]:
    """Mean percentage over grade records; None when nothing is graded."""
    rows = [{"grade": g.grade, "max_grade": g.max_grade} for g in grades]
    df = pd.DataFrame(rows, columns=["grade", "max_grade"])
    df = df[df["max_grade"] != 0]
    if df.empty:
        return None
    return round(float((df["grade"] / df["max_grade"] * 100).mean()), 2)
