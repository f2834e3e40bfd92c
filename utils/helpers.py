from datetime import datetime, date


def format_datetime(datetime_obj):
    """Format datetime to a readable string."""
    if not datetime_obj:
        return None
    return datetime_obj.strftime('%Y-%m-%d %H:%M:%S')

def format_hhmm(datetime_obj):
    """Wall-clock "HH:MM" used by lesson start/end times."""
    return datetime_obj.strftime('%H:%M')

def parse_date(value, default=None):
    """
    Parse a YYYY-MM-DD string. Empty input returns `default`,
    malformed input raises ValueError.
    """
    if not value:
        return default
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")

def today():
    return date.today()
