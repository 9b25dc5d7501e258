import logging
import uuid
from datetime import datetime

from ..models.activity_schema import Activity, ActivityCategory, ActivityInputUnion
from .co2 import estimate_activity_co2
from .time_windows import coerce_timestamp

logger = logging.getLogger(__name__)


def build_activity(payload: ActivityInputUnion, now: datetime) -> Activity:
    """Estimate a submitted activity and turn it into an immutable record."""
    estimate = estimate_activity_co2(payload)
    attributes = payload.model_dump(exclude={"category", "date"}, exclude_none=True)

    activity = Activity(
        id=uuid.uuid4().hex,
        date=coerce_timestamp(payload.date, now),
        category=ActivityCategory(payload.category),
        description=estimate.description,
        co2e=estimate.co2e,
        attributes=attributes,
    )
    logger.debug("Built %s activity %s: %.3f kg", activity.category.value, activity.id, activity.co2e)
    return activity
