"""Query entity.

Queries are questions or requests raised by faculty and answered by
responders (HODs, deans, superadmins).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from acadly.domain.model.common import DomainModel
from acadly.domain.value import ProfileId, QueryId, QueryStatus, QueryType


class Query(DomainModel):
    """Query entity.

    Created open by its author. A responder sets status, response and
    responder_id together; any status may follow any other.
    """

    id: QueryId
    title: str = Field(min_length=3, max_length=255)
    description: str = Field(min_length=10)
    type: QueryType
    status: QueryStatus = QueryStatus.OPEN
    response: Optional[str] = None
    author_id: ProfileId
    responder_id: Optional[ProfileId] = None
    created_at: datetime = Field(default_factory=datetime.now)
