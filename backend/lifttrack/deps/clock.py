from datetime import date, datetime, timezone

def get_today() -> date:
    """Workout days are bucketed by UTC calendar date."""
    return datetime.now(timezone.utc).date()
