from __future__ import annotations

from typing import Annotated, Any, Dict

from pydantic import Field

# Application and endpoint uids share the id alphabet of the API.
Uid = Annotated[str, Field(min_length=1, max_length=256, pattern=r"^[a-zA-Z0-9\-_.]+$")]

EventTypeName = Annotated[str, Field(max_length=256, pattern=r"^[a-zA-Z0-9\-_.]+$")]

FeatureFlag = Annotated[str, Field(max_length=256, pattern=r"^[a-zA-Z0-9\-_.]+$")]

RateLimit = Annotated[int, Field(ge=1, le=65535)]

# Event type schemas, keyed by version: {"1": {<JSON schema>}}.
JsonSchemas = Dict[str, Dict[str, Any]]
