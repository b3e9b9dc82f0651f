import enum


class Priority(str, enum.Enum):
    none = "none"
    low = "low"
    medium = "medium"
    high = "high"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


_PRIORITY_RANK = {Priority.none: 0, Priority.low: 1, Priority.medium: 2, Priority.high: 3}


class RepeatFrequency(str, enum.Enum):
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"
    yearly = "yearly"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Weekday(str, enum.Enum):
    # declaration order is the weekday index: sunday == 0
    sunday = "sunday"
    monday = "monday"
    tuesday = "tuesday"
    wednesday = "wednesday"
    thursday = "thursday"
    friday = "friday"
    saturday = "saturday"

    @property
    def number(self) -> int:
        return _WEEKDAY_NUMBER[self]

    @classmethod
    def from_python(cls, weekday: int) -> "Weekday":
        """Map ``date.weekday()`` (monday == 0) onto the sunday-first ordering."""
        return _WEEKDAYS[(weekday + 1) % 7]


_WEEKDAYS = list(Weekday)
_WEEKDAY_NUMBER = {day: i for i, day in enumerate(_WEEKDAYS)}
