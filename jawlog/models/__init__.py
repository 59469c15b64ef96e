from .daily_log import DailyLog
from .preference import UserPreference, DefaultPreference, PreferenceType
from .onboarding import UserOnboarding
from .subscription import UserSubscription

__all__ = [
    "DailyLog",
    "UserPreference",
    "DefaultPreference",
    "PreferenceType",
    "UserOnboarding",
    "UserSubscription",
]
