# validators.py

def validate_length(field_name, value, max_length):
    if value is not None and len(value) > max_length:
        raise ValueError(f"{field_name} must be {max_length} characters or fewer.")

def validate_time_of_day(field_name, value):
    """Lesson times are stored as zero-padded "HH:MM" strings."""
    parts = value.split(":") if isinstance(value, str) else []
    if len(parts) != 2 or not all(len(p) == 2 and p.isdigit() for p in parts):
        raise ValueError(f"{field_name} must be in HH:MM format.")
    hours, minutes = int(parts[0]), int(parts[1])
    if hours > 23 or minutes > 59:
        raise ValueError(f"{field_name} must be a valid time of day.")
