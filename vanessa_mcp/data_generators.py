"""
Test data generators for 1C forms.

INN, OGRN and SNILS values carry valid check digits; KPP is structural only.
Region and inspection codes are random and not checked against real
directories. Every generator takes an optional `random.Random` so values can be
reproduced.
"""

import random
import uuid
from datetime import date, timedelta
from typing import Callable, Dict, List, Optional, Sequence

from .errors import ScenarioValidationError, UnknownVariantError

INN_WEIGHTS_10 = [2, 4, 10, 3, 5, 9, 4, 6, 8]
INN_WEIGHTS_11 = [7, 2, 4, 10, 3, 5, 9, 4, 6, 8]
INN_WEIGHTS_12 = [3, 7, 2, 4, 10, 3, 5, 9, 4, 6, 8]

PHONE_CODES = ["903", "905", "906", "909", "910", "915", "916", "917", "919", "925", "926", "929"]
EMAIL_NAMES = ["ivan", "petr", "maria", "anna", "alex", "olga", "sergey", "elena"]
EMAIL_DOMAINS = ["mail.ru", "yandex.ru", "gmail.com", "company.ru"]
STRING_WORDS = ["Тест", "Данные", "Проверка", "Образец", "Пример"]


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def _digits(rng: random.Random, width: int, upper: Optional[int] = None) -> str:
    """Zero-padded random number of `width` digits, below `upper` if given"""
    upper = upper if upper is not None else 10 ** width
    return str(rng.randrange(upper)).zfill(width)


def inn_check_digit(digits: str, weights: Sequence[int]) -> int:
    """Weighted sum of the leading digits, mod 11 then mod 10"""
    total = sum(weight * int(digit) for weight, digit in zip(weights, digits))
    return total % 11 % 10


def ogrn_check_digit(base: str) -> int:
    return int(base) % 11 % 10


def snils_checksum(number: str) -> int:
    """Control number of a 9-digit SNILS; a remainder of 100 maps to 0"""
    total = sum(int(digit) * (9 - i) for i, digit in enumerate(number[:9]))
    control = total % 101
    if control == 100:
        control = 0
    return control


def generate_inn(format: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    """12-digit INN by default, 10-digit organisation INN with format='legal'"""
    rng = _rng(rng)
    region = _digits(rng, 2)
    inspection = _digits(rng, 2)
    sequence = _digits(rng, 5)
    base = region + inspection + sequence

    n10 = inn_check_digit(base, INN_WEIGHTS_10)
    if format == "legal":
        return f"{base}{n10}"

    n11 = inn_check_digit(f"{base}{n10}", INN_WEIGHTS_11)
    n12 = inn_check_digit(f"{base}{n10}{n11}", INN_WEIGHTS_12)
    return f"{base}{n10}{n11}{n12}"


def generate_kpp(format: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    rng = _rng(rng)
    region = _digits(rng, 2)
    inspection = _digits(rng, 2)
    reason = "01"
    sequence = _digits(rng, 3)
    return region + inspection + reason + sequence


def generate_ogrn(format: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    rng = _rng(rng)
    sign = "1"
    year = _digits(rng, 2, upper=24)
    region = _digits(rng, 2)
    sequence = _digits(rng, 7)
    base = sign + year + region + sequence
    return f"{base}{ogrn_check_digit(base)}"


def format_snils(number: str) -> str:
    control = snils_checksum(number)
    return f"{number[0:3]}-{number[3:6]}-{number[6:9]} {control:02d}"


def generate_snils(format: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    rng = _rng(rng)
    return format_snils(_digits(rng, 9))


def generate_phone(format: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    rng = _rng(rng)
    code = rng.choice(PHONE_CODES)
    number = _digits(rng, 7)
    if format == "international":
        return f"+7 ({code}) {number[0:3]}-{number[3:5]}-{number[5:7]}"
    return f"8{code}{number}"


def generate_email(format: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    rng = _rng(rng)
    name = rng.choice(EMAIL_NAMES)
    number = rng.randrange(999)
    domain = rng.choice(EMAIL_DOMAINS)
    return f"{name}{number}@{domain}"


def generate_date(
    format: Optional[str] = None,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> str:
    """Random date within the last year"""
    rng = _rng(rng)
    today = today or date.today()
    value = today - timedelta(days=rng.randrange(365))
    if format == "iso":
        return value.isoformat()
    return value.strftime("%d.%m.%Y")


def generate_string(format: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    rng = _rng(rng)
    if format == "uuid":
        return str(uuid.UUID(int=rng.getrandbits(128), version=4))
    return f"{rng.choice(STRING_WORDS)}_{rng.randrange(9999)}"


def generate_number(format: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    rng = _rng(rng)
    if format == "float":
        return f"{rng.random() * 10000:.2f}"
    return str(rng.randrange(999999))


GENERATORS: Dict[str, Callable[..., str]] = {
    "inn": generate_inn,
    "kpp": generate_kpp,
    "ogrn": generate_ogrn,
    "snils": generate_snils,
    "phone": generate_phone,
    "email": generate_email,
    "date": generate_date,
    "string": generate_string,
    "number": generate_number,
}


def generate_test_data(
    data_type: str,
    count: int = 1,
    format: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Generate `count` values of the given data type"""
    if data_type not in GENERATORS:
        raise UnknownVariantError("data type", data_type, list(GENERATORS))
    if count < 1:
        raise ScenarioValidationError(f"Count must be at least 1, got {count}")

    generator = GENERATORS[data_type]
    rng = _rng(rng)
    return [generator(format=format, rng=rng) for _ in range(count)]
