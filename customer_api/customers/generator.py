"""Random customer data for bulk generation."""

import random

from customer_api.customers.models import CustomerDraft

FIRST_NAMES = (
    "James", "Mary", "John", "Patricia", "Robert", "Jennifer", "Michael", "Linda",
    "William", "Barbara", "David", "Elizabeth", "Richard", "Susan", "Joseph", "Jessica",
    "Thomas", "Sarah", "Christopher", "Karen", "Charles", "Nancy", "Daniel", "Lisa",
    "Matthew", "Margaret", "Anthony", "Betty", "Mark", "Sandra", "Donald", "Ashley",
    "Steven", "Kimberly", "Andrew", "Emily", "Paul", "Donna", "Joshua", "Michelle",
    "Kenneth", "Carol", "Kevin", "Amanda", "Brian", "Melissa", "George", "Deborah",
    "Timothy", "Stephanie", "Ronald", "Dorothy", "Edward", "Rebecca", "Jason", "Sharon",
    "Jeffrey", "Laura", "Ryan", "Cynthia", "Jacob", "Amy",
)  # fmt: skip

LAST_NAMES = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson", "Thomas",
    "Taylor", "Moore", "Jackson", "Martin", "Lee", "Perez", "Thompson", "White",
    "Harris", "Sanchez", "Clark", "Ramirez", "Lewis", "Robinson", "Walker", "Young",
    "Allen", "King", "Wright", "Scott", "Torres", "Nguyen", "Hill", "Flores",
    "Green", "Adams", "Nelson", "Baker", "Hall", "Rivera", "Campbell", "Mitchell",
    "Carter", "Roberts", "Gomez", "Phillips", "Evans", "Turner", "Diaz", "Parker",
    "Cruz", "Edwards", "Collins", "Reyes", "Stewart", "Morris", "Morales", "Murphy",
)  # fmt: skip

EMAIL_DOMAINS = (
    "gmail.com", "yahoo.com", "hotmail.com", "outlook.com", "icloud.com",
    "aol.com", "protonmail.com", "mail.com", "zoho.com", "gmx.com",
)  # fmt: skip

STREETS = (
    "Main St", "Oak Ave", "Maple Dr", "Park Blvd", "Cedar Ln",
    "Elm St", "Washington Ave", "Lake Rd", "Hill St", "Pine Ct",
    "First St", "Second Ave", "Third St", "Fourth Ave", "Fifth St",
    "Broadway", "Market St", "Church St", "Walnut St", "Chestnut St",
)  # fmt: skip

CITIES = (
    "New York", "Los Angeles", "Chicago", "Houston", "Phoenix",
    "Philadelphia", "San Antonio", "San Diego", "Dallas", "San Jose",
    "Austin", "Jacksonville", "Fort Worth", "Columbus", "Charlotte",
    "San Francisco", "Indianapolis", "Seattle", "Denver", "Boston",
    "Portland", "Nashville", "Memphis", "Detroit", "Baltimore",
)  # fmt: skip

STATES = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
)  # fmt: skip

COUNTRIES = (
    "United States", "Canada", "United Kingdom", "Australia", "Germany",
    "France", "Spain", "Italy", "Netherlands", "Sweden",
)  # fmt: skip


class RandomCustomerGenerator:
    """Generates realistic customer drafts.

    Emails are unique within one batch: on a repeat the batch index is
    appended to the local part. Pass a seeded ``random.Random`` for
    reproducible output.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate(self, count: int, created_by: str | None = None) -> list[CustomerDraft]:
        """Generate ``count`` drafts with batch-unique emails."""
        drafts: list[CustomerDraft] = []
        used_emails: set[str] = set()

        for index in range(count):
            first = self._rng.choice(FIRST_NAMES)
            last = self._rng.choice(LAST_NAMES)
            email = self._email(first, last, index, used_emails)
            used_emails.add(email)

            drafts.append(
                CustomerDraft(
                    name=f"{first} {last}",
                    email=email,
                    phone=self._phone(),
                    address=self._address(),
                    created_by=created_by,
                )
            )

        return drafts

    def _email(self, first: str, last: str, index: int, used: set[str]) -> str:
        domain = self._rng.choice(EMAIL_DOMAINS)
        local = f"{first.lower()}.{last.lower()}"
        email = f"{local}@{domain}"
        if email in used:
            # Base addresses contain no digits, so an indexed one cannot repeat
            return f"{local}{index}@{domain}"
        return email

    def _phone(self) -> str:
        area = self._rng.randrange(200, 999)
        prefix = self._rng.randrange(200, 999)
        line = self._rng.randrange(1000, 9999)
        return f"+1-{area}-{prefix}-{line}"

    def _address(self) -> str:
        number = self._rng.randrange(1, 9999)
        street = self._rng.choice(STREETS)
        city = self._rng.choice(CITIES)
        state = self._rng.choice(STATES)
        postal_code = self._rng.randrange(10000, 99999)
        country = self._rng.choice(COUNTRIES)
        return f"{number} {street}, {city}, {state} {postal_code}, {country}"
