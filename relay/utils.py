from datetime import datetime, timezone

from .constants import EVENT_LABELS

# Layouts ISO-8601 aceitos: Adapty (microssegundos + offset numérico) e RFC 3339
DATE_LAYOUTS = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
)

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 12 * _MONTH

# (limite superior exclusivo em segundos, formato, divisor)
DURATION_MAGNITUDES = (
    (1, "now", 1),
    (2, "1 second", 1),
    (_MINUTE, "{} seconds", 1),
    (2 * _MINUTE, "1 minute", 1),
    (_HOUR, "{} minutes", _MINUTE),
    (2 * _HOUR, "1 hour", 1),
    (_DAY, "{} hours", _HOUR),
    (2 * _DAY, "1 day", 1),
    (_WEEK, "{} days", _DAY),
    (2 * _WEEK, "1 week", 1),
    (_MONTH, "{} weeks", _WEEK),
    (2 * _MONTH, "1 month", 1),
    (_YEAR, "{} months", _MONTH),
    (_YEAR * 18 // 12, "1 year", 1),
    (2 * _YEAR, "2 years", 1),
)


def _is_meaningful(value):
    if value is None:
        return False
    if isinstance(value, bool):
        return True
    return str(value).strip() != ""


def pick_first_nonempty(*candidates):
    for c in candidates:
        if _is_meaningful(c):
            return c
    return None


def _to_datetime(value):
    if isinstance(value, datetime):
        return value
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


def format_rfc3339(epoch_seconds):
    return _to_datetime(epoch_seconds).astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def safe_rfc3339(epoch_seconds):
    # Epoch fora do intervalo suportado por datetime conta como ausente
    try:
        return format_rfc3339(epoch_seconds)
    except (ValueError, OverflowError, OSError):
        return None


def _human_date(dt: datetime) -> str:
    dt = dt.astimezone(timezone.utc)
    return f"{dt.strftime('%b')} {dt.day}, {dt.year} {dt.strftime('%H:%M')} UTC"


def format_date(value):
    """Converte um timestamp ISO-8601 em "Jan 2, 2006 15:04 UTC".

    Se nenhum layout reconhecer o valor, ele é devolvido sem alteração.
    """
    if not isinstance(value, str) or not value.strip():
        return value
    candidate = value.strip()
    for layout in DATE_LAYOUTS:
        try:
            parsed = datetime.strptime(candidate, layout)
        except ValueError:
            continue
        try:
            return _human_date(parsed)
        except OverflowError:
            return value
    return value


def format_event_type(event_type):
    if not event_type:
        return "Unknown Event"
    label = EVENT_LABELS.get(event_type)
    if label:
        return label
    parts = [p[:1].upper() + p[1:] for p in str(event_type).split("_") if p]
    return " ".join(parts)


def format_duration(start, end):
    """Frase relativa entre dois instantes (epoch em segundos ou datetime), ex.: "3 hours"."""
    seconds = abs(int((_to_datetime(end) - _to_datetime(start)).total_seconds()))
    for limit, template, divisor in DURATION_MAGNITUDES:
        if seconds < limit:
            return template.format(seconds // divisor)
    return f"{seconds // _YEAR} years"


def format_amount(value, currency=None):
    try:
        if value is None:
            return None
        amount = f"{float(value):.2f}"
    except (TypeError, ValueError):
        return None
    return f"{amount} {currency}" if currency else amount


def yes_no(flag):
    return "Yes" if flag else "No"
