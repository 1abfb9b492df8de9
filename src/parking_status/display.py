"""Text formatting for lot information shown to users."""


def format_hourly_rate(rate: float) -> str:
    """Format a rate as "$3.50/hour"."""
    return f"${rate:.2f}/hour"


def format_availability(available: int, total: int) -> str:
    """Format availability as "available/total"."""
    return f"{available}/{total}"
