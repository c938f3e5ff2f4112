import re
from datetime import datetime

DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_valid_name(name: str) -> bool:
    return bool(name) and 1 <= len(name.strip()) <= 100


def is_valid_date_key(date_str: str) -> bool:
    if not DATE_KEY_RE.match(date_str or ""):
        return False
    try:
        datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError:
        return False
    return True
