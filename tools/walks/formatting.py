"""Форматирование времени и расстояния прогулки для клиента."""


def format_duration(seconds: int) -> str:
    """Секунды в m:ss, с часа: h:mm:ss."""
    seconds = max(0, int(seconds))
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_distance(meters: float) -> str:
    if meters >= 1000:
        return f"{meters / 1000:.2f} km"
    return f"{round(meters)} m"


def format_journal_duration(minutes: int) -> str:
    """Минуты для журнала: '1h 5m' или '45m'."""
    hours, mins = divmod(max(0, int(minutes)), 60)
    if hours > 0:
        return f"{hours}h {mins}m"
    return f"{mins}m"
