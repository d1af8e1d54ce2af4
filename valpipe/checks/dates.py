"""Date/Time Layout Checkers

Shape checks for common textual timestamp layouts. These only verify the
layout of the string; they do not parse it into a datetime.
"""
import re

_DAY = r"(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun)"
_LONG_DAY = r"(?:Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)"
_MONTH = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
_PADDED_DAY = r"(?:\d| \d|\d{2})"
_CLOCK = r"\d{2}:\d{2}:\d{2}"

_ANSIC = re.compile(rf"^{_DAY} {_MONTH} {_PADDED_DAY} {_CLOCK} \d{{4}}$")
_UNIX_DATE = re.compile(rf"^{_DAY} {_MONTH} {_PADDED_DAY} {_CLOCK} [A-Z]{{3,4}} \d{{4}}$")
_RUBY_DATE = re.compile(rf"^{_DAY} {_MONTH} \d{{2}} {_CLOCK} [+-]\d{{4}} \d{{4}}$")
_RFC822 = re.compile(rf"^\d{{2}} {_MONTH} \d{{2}} \d{{2}}:\d{{2}} [A-Z]{{3,4}}$")
_RFC822Z = re.compile(rf"^\d{{2}} {_MONTH} \d{{2}} \d{{2}}:\d{{2}} [+-]\d{{4}}$")
_RFC850 = re.compile(rf"^{_LONG_DAY}, \d{{2}}-{_MONTH}-\d{{2}} {_CLOCK} [A-Z]{{3,4}}$")
_RFC1123 = re.compile(rf"^{_DAY}, \d{{2}} {_MONTH} \d{{4}} {_CLOCK} [A-Z]{{3,4}}$")
_RFC1123Z = re.compile(rf"^{_DAY}, \d{{2}} {_MONTH} \d{{4}} {_CLOCK} [+-]\d{{4}}$")
_RFC3339 = re.compile(rf"^\d{{4}}-\d{{2}}-\d{{2}}T{_CLOCK}(?:Z|[+-]\d{{2}}:\d{{2}})$")
_RFC3339_NANO = re.compile(rf"^\d{{4}}-\d{{2}}-\d{{2}}T{_CLOCK}(?:\.\d{{1,9}})?(?:Z|[+-]\d{{2}}:\d{{2}})$")
_KITCHEN = re.compile(r"^\d{1,2}:\d{2}(?:AM|PM)$")
_STAMP = re.compile(rf"^{_MONTH} {_PADDED_DAY} {_CLOCK}$")
_STAMP_MILLI = re.compile(rf"^{_MONTH} {_PADDED_DAY} {_CLOCK}\.\d{{3}}$")
_STAMP_MICRO = re.compile(rf"^{_MONTH} {_PADDED_DAY} {_CLOCK}\.\d{{6}}$")
_STAMP_NANO = re.compile(rf"^{_MONTH} {_PADDED_DAY} {_CLOCK}\.\d{{9}}$")
_DATE_TIME = re.compile(rf"^\d{{4}}-\d{{2}}-\d{{2}} {_CLOCK}$")
_TIME_ONLY = re.compile(rf"^{_CLOCK}$")


def is_ansic(value: str) -> bool:
    """``Mon Jan _2 15:04:05 2006``"""
    return bool(_ANSIC.match(value))


def is_unix_date(value: str) -> bool:
    """``Mon Jan _2 15:04:05 MST 2006``"""
    return bool(_UNIX_DATE.match(value))


def is_ruby_date(value: str) -> bool:
    """``Mon Jan 02 15:04:05 -0700 2006``"""
    return bool(_RUBY_DATE.match(value))


def is_rfc822(value: str) -> bool:
    """``02 Jan 06 15:04 MST``"""
    return bool(_RFC822.match(value))


def is_rfc822z(value: str) -> bool:
    """``02 Jan 06 15:04 -0700``"""
    return bool(_RFC822Z.match(value))


def is_rfc850(value: str) -> bool:
    """``Monday, 02-Jan-06 15:04:05 MST``"""
    return bool(_RFC850.match(value))


def is_rfc1123(value: str) -> bool:
    """``Mon, 02 Jan 2006 15:04:05 MST``"""
    return bool(_RFC1123.match(value))


def is_rfc1123z(value: str) -> bool:
    """``Mon, 02 Jan 2006 15:04:05 -0700``"""
    return bool(_RFC1123Z.match(value))


def is_rfc3339(value: str) -> bool:
    """``2006-01-02T15:04:05Z07:00``"""
    return bool(_RFC3339.match(value))


def is_rfc3339_nano(value: str) -> bool:
    """``2006-01-02T15:04:05.999999999Z07:00``"""
    if not 20 <= len(value) <= 39 or "T" not in value:
        return False
    return bool(_RFC3339_NANO.match(value))


def is_kitchen(value: str) -> bool:
    """``3:04PM``"""
    return bool(_KITCHEN.match(value))


def is_stamp(value: str) -> bool:
    """``Jan _2 15:04:05``"""
    return bool(_STAMP.match(value))


def is_stamp_milli(value: str) -> bool:
    return bool(_STAMP_MILLI.match(value))


def is_stamp_micro(value: str) -> bool:
    return bool(_STAMP_MICRO.match(value))


def is_stamp_nano(value: str) -> bool:
    return bool(_STAMP_NANO.match(value))


def is_date_time(value: str) -> bool:
    """``2006-01-02 15:04:05``"""
    return bool(_DATE_TIME.match(value))


def is_time_only(value: str) -> bool:
    """``15:04:05``"""
    return bool(_TIME_ONLY.match(value))
