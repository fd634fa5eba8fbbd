import re

_NON_DIGITS = re.compile(r"[^0-9]")


def clean_phone(phone) -> str:
    # "94637 33229" -> "9463733229"
    if phone is None:
        return ""
    return _NON_DIGITS.sub("", str(phone))


def clean_text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def service_list(service) -> list:
    """Resolve the scalar-or-list ``service`` input into an ordered list."""
    if service is None:
        return []
    if isinstance(service, (list, tuple)):
        return list(service)
    return [service]
