def blank_to_none(value):
    """Treat empty or whitespace-only strings as missing"""
    if isinstance(value, str) and not value.strip():
        return None
    return value
