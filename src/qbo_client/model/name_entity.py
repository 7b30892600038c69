"""
Rules shared by the "name list" people entities: customers, vendors and
employees all carry the same name parts and primary e-mail address.
"""

import re
from typing import Any, Tuple

from .validations import Custom, LengthOf, Rule

# QuickBooks rejects these characters in display names
INVALID_NAME_CHARACTERS = (":", "\t", "\n")

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def names_are_clean(model: Any) -> bool:
    name = model.display_name
    return name is None or not any(c in name for c in INVALID_NAME_CHARACTERS)


def email_is_valid(model: Any) -> bool:
    email = model.primary_email_address
    if email is None or email.address is None:
        return True
    return EMAIL_PATTERN.match(email.address) is not None


def name_entity_rules() -> Tuple[Rule, ...]:
    return (
        LengthOf("given_name", "middle_name", "family_name", maximum=25),
        LengthOf("title", maximum=15),
        LengthOf("suffix", maximum=10),
        LengthOf("display_name", maximum=100),
        Custom(
            "display_name",
            names_are_clean,
            message="cannot contain a colon (:), tab or newline",
        ),
        Custom(
            "primary_email_address",
            email_is_valid,
            message="is not a valid email address",
        ),
    )
