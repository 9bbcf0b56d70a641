from envload.domain.models import Assignment, MalformedLine

QUOTES = ('"', "'")


def strip_quotes(value: str) -> str:
    """Remove one layer of matching single or double quotes."""
    if len(value) < 2:
        return value
    first, last = value[0], value[-1]
    if first == last and first in QUOTES:
        return value[1:-1]
    return value


def parse_line(text: str) -> Assignment | MalformedLine:
    name, sep, value = text.partition("=")
    if not sep or not name:
        return MalformedLine(text)
    return Assignment(name, strip_quotes(value))
