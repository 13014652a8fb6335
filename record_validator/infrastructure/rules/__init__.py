"""Custom rule types.

Every module here exposes ``setup(registry)``. ``RULE_SETUPS`` is the
static list run each time the engine language changes; add new rule
modules to it.
"""

from . import phone, zip_code

RULE_SETUPS = (
    phone.setup,
    zip_code.setup,
)

__all__ = ["RULE_SETUPS"]
