"""Locale-specific wording for counted units such as years and months."""

from dataclasses import dataclass
from typing import Callable

from timekeep.domain.errors import ValidationError


def english_form(n: int) -> str:
    """Return 'one' or 'other' following English rules."""
    return "one" if n == 1 else "other"


def russian_form(n: int) -> str:
    """Return 'one', 'few' or 'many' following Russian rules.

    1, 21, 31... take 'one'; 2-4, 22-24... take 'few'; everything else,
    including 11-14, takes 'many'.
    """
    last_two = n % 100
    last = n % 10
    if last == 1 and last_two != 11:
        return "one"
    if 2 <= last <= 4 and not 12 <= last_two <= 14:
        return "few"
    return "many"


@dataclass(frozen=True)
class PluralPolicy:
    """Word forms for years and months in a single locale."""

    locale: str
    select: Callable[[int], str]
    years: dict[str, str]
    months: dict[str, str]

    def format_years(self, n: int) -> str:
        return f"{n} {self.years[self.select(n)]}"

    def format_months(self, n: int) -> str:
        return f"{n} {self.months[self.select(n)]}"


PLURAL_POLICIES: dict[str, PluralPolicy] = {
    "en": PluralPolicy(
        locale="en",
        select=english_form,
        years={"one": "year", "other": "years"},
        months={"one": "month", "other": "months"},
    ),
    "ru": PluralPolicy(
        locale="ru",
        select=russian_form,
        years={"one": "год", "few": "года", "many": "лет"},
        months={"one": "месяц", "few": "месяца", "many": "месяцев"},
    ),
}


def get_plural_policy(locale: str) -> PluralPolicy:
    """Look up the wording policy for a locale.

    Accepts region-qualified tags such as 'ru-RU' or 'en_US'.

    Raises:
        ValidationError: If no policy is registered for the locale
    """
    key = locale.strip().lower().replace("_", "-").split("-")[0]
    try:
        return PLURAL_POLICIES[key]
    except KeyError:
        supported = ", ".join(sorted(PLURAL_POLICIES))
        raise ValidationError(f"Unsupported locale '{locale}'. Supported locales: {supported}")
