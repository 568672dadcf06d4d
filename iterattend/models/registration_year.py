"""Registration year data model."""
from dataclasses import dataclass


@dataclass
class RegistrationYear:
    """One academic year's registration record."""

    registration_id: str
    registered_from: str  # sortable date string, e.g. YYYY-MM-DD

    def __post_init__(self):
        """Validate registration year after initialization."""
        if not isinstance(self.registration_id, str):
            raise ValueError("Registration ID must be a string")

        if not isinstance(self.registered_from, str):
            raise ValueError("Registration start date must be a string")
