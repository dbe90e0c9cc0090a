def contains_pattern(text):
    """ILIKE pattern matching ``text`` literally anywhere; use with escape="\\"."""
    escaped = (
        text.strip()
        .replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    return f"%{escaped}%"
