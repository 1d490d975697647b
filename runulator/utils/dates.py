"""Date helpers for the user profile."""

from datetime import date


def calculate_age(birthday: date, today: date | None = None) -> int:
    """Calculate the age in full years on `today` (defaults to the current date)."""
    if today is None:
        today = date.today()
    age = today.year - birthday.year
    if (today.month, today.day) < (birthday.month, birthday.day):
        age -= 1
    return age
