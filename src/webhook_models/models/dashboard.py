from __future__ import annotations

from webhook_models.core.record import Record
from webhook_models.registry import register_record


@register_record("DashboardAccessOut")
class DashboardAccessOut(Record):
    token: str
    url: str
