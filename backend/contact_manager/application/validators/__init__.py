from .contact_validator import ContactValidator

__all__ = [
    "ContactValidator",
]
