"""Supabase-backed profile repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from fitness_tracker.adapters.snapshots import parse_datetime
from fitness_tracker.domain.profiles import (
    DEFAULT_CALORIE_GOAL,
    ActivityLevel,
    Gender,
    GoalType,
    UserProfile,
)
from fitness_tracker.services.profiles import ProfileRepository

_FLOAT_FIELDS = ("current_weight", "height_inches", "goal_weight")
_INT_FIELDS = (
    "height_feet",
    "age",
    "goal_weeks",
    "protein_goal",
    "carbs_goal",
    "fat_goal",
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_row(response.data[0])
        return None

    def create_profile(self, profile: UserProfile) -> UserProfile:
        """Insert a profile row and return it."""
        response = self.client.table("profiles").insert(_to_row(profile)).execute()
        if not response.data:
            raise RuntimeError("Failed to create profile in Supabase")
        return _parse_row(response.data[0])

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Overwrite the profile row for a user."""
        row = _to_row(profile)
        row.pop("created_at", None)
        row["updated_at"] = datetime.now(tz=UTC).isoformat()
        response = (
            self.client.table("profiles")
            .update(row)
            .eq("user_id", profile.user_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update profile in Supabase")
        return _parse_row(response.data[0])


def _to_row(profile: UserProfile) -> dict[str, object]:
    row: dict[str, object] = {
        "user_id": profile.user_id,
        "email": profile.email,
        "display_name": profile.display_name,
        "calorie_goal": profile.calorie_goal,
        "timezone": profile.timezone,
        "gender": profile.gender.value if profile.gender else None,
        "activity_level": (
            profile.activity_level.value if profile.activity_level else None
        ),
        "goal_type": profile.goal_type.value if profile.goal_type else None,
        "created_at": profile.created_at.isoformat() if profile.created_at else None,
    }
    for name in (*_FLOAT_FIELDS, *_INT_FIELDS):
        row[name] = getattr(profile, name)
    return row


def _parse_row(row: dict[str, object]) -> UserProfile:
    numbers: dict[str, object] = {}
    for name in _FLOAT_FIELDS:
        value = row.get(name)
        numbers[name] = float(value) if value is not None else None
    for name in _INT_FIELDS:
        value = row.get(name)
        numbers[name] = int(value) if value is not None else None
    return UserProfile(
        user_id=str(row["user_id"]),
        email=str(row.get("email") or ""),
        display_name=str(row.get("display_name") or ""),
        calorie_goal=int(row.get("calorie_goal") or DEFAULT_CALORIE_GOAL),
        timezone=str(row.get("timezone") or "UTC"),
        gender=Gender(row["gender"]) if row.get("gender") else None,
        activity_level=(
            ActivityLevel(row["activity_level"]) if row.get("activity_level") else None
        ),
        goal_type=GoalType(row["goal_type"]) if row.get("goal_type") else None,
        created_at=parse_datetime(row["created_at"]) if row.get("created_at") else None,
        **numbers,
    )
