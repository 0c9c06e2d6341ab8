# File: /gridbase/crud/synthetic.py | Version: 1.0 | Title: Synthetic cell values chosen by column name
from __future__ import annotations

import random
from typing import Callable, List, Optional, Tuple

FIRST_NAMES = [
    "Alice", "Bob", "Carol", "David", "Emma", "Farid", "Grace", "Hiro", "Ines",
    "Jonas", "Keiko", "Liam", "Maya", "Noah", "Olga", "Priya", "Quinn", "Rosa",
    "Sven", "Tara", "Umar", "Vera", "Wen", "Xavier", "Yara", "Zoe",
]
LAST_NAMES = [
    "Anderson", "Brown", "Chen", "Dubois", "Evans", "Fischer", "Garcia", "Hughes",
    "Ivanova", "Johnson", "Kowalski", "Lopez", "Martin", "Nakamura", "Okafor",
    "Patel", "Rossi", "Silva", "Takahashi", "Urban", "Virtanen", "Walker", "Young",
]
EMAIL_DOMAINS = ["example.com", "mail.test", "inbox.dev", "corp.example"]
COUNTRIES = [
    "Argentina", "Australia", "Brazil", "Canada", "China", "Egypt", "France",
    "Germany", "India", "Italy", "Japan", "Kenya", "Mexico", "Netherlands",
    "New Zealand", "Nigeria", "Norway", "Poland", "Portugal", "South Africa",
    "South Korea", "Spain", "Sweden", "United Kingdom", "United States",
]
CITIES = [
    "Amsterdam", "Berlin", "Cairo", "Dublin", "Edinburgh", "Helsinki", "Lagos",
    "Lisbon", "London", "Madrid", "Melbourne", "Mumbai", "Nairobi", "Osaka",
    "Paris", "Rome", "Santiago", "Seoul", "Shanghai", "Stockholm", "Sydney",
    "Toronto", "Vancouver", "Warsaw",
]
COMPANY_WORDS = [
    "Acme", "Blue", "Crest", "Delta", "Evergreen", "Falcon", "Granite", "Harbor",
    "Ion", "Juniper", "Keystone", "Lumen", "Meridian", "North", "Orbit", "Pioneer",
]
COMPANY_SUFFIXES = ["Inc", "LLC", "Group", "Labs", "Systems", "Partners", "Co"]
JOB_LEVELS = ["Junior", "Senior", "Lead", "Principal", "Chief", "Associate"]
JOB_AREAS = ["Data", "Marketing", "Product", "Security", "Finance", "Operations"]
JOB_ROLES = ["Engineer", "Analyst", "Manager", "Designer", "Consultant", "Director"]
PHRASE_WORDS = [
    "amber", "bright", "calm", "distant", "early", "fresh", "gentle", "hidden",
    "quiet", "rapid", "silver", "steady", "river", "meadow", "signal", "harbor",
    "lantern", "orbit", "canvas", "summit", "thread", "window", "garden", "pulse",
]


def person_name(rng: random.Random) -> str:
    return f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"


def email_address(rng: random.Random) -> str:
    first = rng.choice(FIRST_NAMES).lower()
    last = rng.choice(LAST_NAMES).lower()
    return f"{first}.{last}{rng.randint(1, 999)}@{rng.choice(EMAIL_DOMAINS)}"


def country_name(rng: random.Random) -> str:
    return rng.choice(COUNTRIES)


def city_name(rng: random.Random) -> str:
    return rng.choice(CITIES)


def company_name(rng: random.Random) -> str:
    return f"{rng.choice(COMPANY_WORDS)} {rng.choice(COMPANY_SUFFIXES)}"


def job_title(rng: random.Random) -> str:
    return f"{rng.choice(JOB_LEVELS)} {rng.choice(JOB_AREAS)} {rng.choice(JOB_ROLES)}"


def short_phrase(rng: random.Random) -> str:
    return " ".join(rng.sample(PHRASE_WORDS, rng.randint(2, 4)))


# Returns the raw string plus the parsed number stored alongside it
NumberGen = Callable[[random.Random], Tuple[str, float]]
TextGen = Callable[[random.Random], str]


def _age(rng: random.Random) -> Tuple[str, float]:
    n = rng.randint(18, 65)
    return str(n), float(n)


def _price(rng: random.Random) -> Tuple[str, float]:
    raw = f"{rng.uniform(10, 1000):.2f}"
    return raw, float(raw)


def _quantity(rng: random.Random) -> Tuple[str, float]:
    n = rng.randint(1, 100)
    return str(n), float(n)


def _rating(rng: random.Random) -> Tuple[str, float]:
    raw = f"{rng.uniform(1, 5):.1f}"
    return raw, float(raw)


def _default_number(rng: random.Random) -> Tuple[str, float]:
    n = rng.randint(1, 1000)
    return str(n), float(n)


# First matching keyword wins
_TEXT_RULES: List[Tuple[Tuple[str, ...], TextGen]] = [
    (("name",), person_name),
    (("email",), email_address),
    (("country",), country_name),
    (("city",), city_name),
    (("company",), company_name),
    (("job", "title"), job_title),
]

_NUMBER_RULES: List[Tuple[Tuple[str, ...], NumberGen]] = [
    (("age",), _age),
    (("price", "cost"), _price),
    (("quantity", "count"), _quantity),
    (("rating",), _rating),
]


def text_generator_for(column_name: str) -> TextGen:
    lowered = (column_name or "").lower()
    for keywords, gen in _TEXT_RULES:
        if any(k in lowered for k in keywords):
            return gen
    return short_phrase


def number_generator_for(column_name: str) -> NumberGen:
    lowered = (column_name or "").lower()
    for keywords, gen in _NUMBER_RULES:
        if any(k in lowered for k in keywords):
            return gen
    return _default_number


def cell_value_factory(
    column_type: str, column_name: str
) -> Callable[[random.Random], Tuple[str, Optional[str], Optional[float]]]:
    """
    Returns a callable producing (value, flattened_value_text,
    flattened_value_number) for one cell of the given column.
    """
    if column_type == "number":
        num_gen = number_generator_for(column_name)

        def _number_cell(rng: random.Random):
            raw, parsed = num_gen(rng)
            return raw, None, parsed

        return _number_cell

    text_gen = text_generator_for(column_name)

    def _text_cell(rng: random.Random):
        raw = text_gen(rng)
        return raw, raw, None

    return _text_cell
