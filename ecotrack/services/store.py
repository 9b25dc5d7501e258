"""In-process stand-in for the external per-user document store."""

import logging
import threading
from collections import defaultdict
from typing import Dict, List, Optional

from ..models.activity_schema import Activity
from ..models.goal_schema import GoalStatus, WeeklyGoal

logger = logging.getLogger(__name__)


class InMemoryStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._activities: Dict[str, Dict[str, Activity]] = defaultdict(dict)
        self._goals: Dict[str, Dict[str, WeeklyGoal]] = defaultdict(dict)

    # activities

    def add_activity(self, user_id: str, activity: Activity) -> Activity:
        with self._lock:
            self._activities[user_id][activity.id] = activity
        return activity

    def list_activities(self, user_id: str) -> List[Activity]:
        """Newest first."""
        with self._lock:
            items = list(self._activities.get(user_id, {}).values())
        return sorted(items, key=lambda a: a.date, reverse=True)

    def delete_activity(self, user_id: str, activity_id: str) -> bool:
        with self._lock:
            return self._activities.get(user_id, {}).pop(activity_id, None) is not None

    def clear_activities(self, user_id: str) -> int:
        with self._lock:
            removed = len(self._activities.pop(user_id, {}))
        logger.info("Cleared %s activities for user %s", removed, user_id)
        return removed

    # goals

    def update_goal(self, goal: WeeklyGoal) -> WeeklyGoal:
        with self._lock:
            if goal.id not in self._goals.get(goal.userId, {}):
                raise KeyError(goal.id)
            self._goals[goal.userId][goal.id] = goal
        return goal

    def replace_active_goal(self, goal: WeeklyGoal) -> List[WeeklyGoal]:
        """Mark the user's active goals failed and add ``goal`` in one step.

        Returns the goals that were superseded.
        """
        with self._lock:
            goals = self._goals[goal.userId]
            superseded = [
                g.model_copy(update={"status": GoalStatus.failed})
                for g in goals.values()
                if g.status == GoalStatus.active
            ]
            for previous in superseded:
                goals[previous.id] = previous
            goals[goal.id] = goal
        return superseded

    def list_goals(self, user_id: str) -> List[WeeklyGoal]:
        """Most recent week first."""
        with self._lock:
            items = list(self._goals.get(user_id, {}).values())
        return sorted(items, key=lambda g: (g.startDate, g.createdAt), reverse=True)

    def get_active_goal(self, user_id: str) -> Optional[WeeklyGoal]:
        for goal in self.list_goals(user_id):
            if goal.status == GoalStatus.active:
                return goal
        return None


store = InMemoryStore()
