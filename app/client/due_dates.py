"""
➡️ But : Classer une tâche selon sa date d'échéance (affichage uniquement).

classify_due_date(due_date, now) → none | overdue | today | tomorrow | upcoming

Comparaison par date calendaire, en UTC pour les deux côtés : l'heure est ignorée.
Fonction pure, recalculée à chaque rendu, elle ne modifie aucune donnée.
"""

import datetime
from enum import Enum
from typing import Optional

from app.utils.dates import as_utc, utcnow


class DueStatus(str, Enum):
    NONE = "none"
    OVERDUE = "overdue"
    TODAY = "today"
    TOMORROW = "tomorrow"
    UPCOMING = "upcoming"


def classify_due_date(
    due_date: Optional[datetime.datetime],
    now: Optional[datetime.datetime] = None,
) -> DueStatus:
    if due_date is None:
        return DueStatus.NONE

    today = as_utc(now or utcnow()).date()
    due = as_utc(due_date).date()

    if due < today:
        return DueStatus.OVERDUE
    if due == today:
        return DueStatus.TODAY
    if due == today + datetime.timedelta(days=1):
        return DueStatus.TOMORROW
    return DueStatus.UPCOMING
