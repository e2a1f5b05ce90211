from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from webhook_models.core.fields import nullable_field
from webhook_models.core.nullable import Nullable
from webhook_models.core.record import Record
from webhook_models.models._types import RateLimit, Uid
from webhook_models.registry import register_record


@register_record("ApplicationIn")
class ApplicationIn(Record):
    metadata: Optional[Dict[str, str]] = None
    name: str
    rate_limit: Nullable[RateLimit] = nullable_field()
    uid: Nullable[Uid] = nullable_field()


@register_record("ApplicationOut")
class ApplicationOut(Record):
    created_at: datetime
    id: str
    metadata: Optional[Dict[str, str]] = None
    name: str
    rate_limit: Nullable[RateLimit] = nullable_field()
    uid: Nullable[Uid] = nullable_field()
    updated_at: datetime
