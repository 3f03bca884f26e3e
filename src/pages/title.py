import re

TITLE_PATTERN = re.compile(r"[a-zA-Z0-9]+")


def is_valid_title(title: str) -> bool:
    return TITLE_PATTERN.fullmatch(title) is not None
