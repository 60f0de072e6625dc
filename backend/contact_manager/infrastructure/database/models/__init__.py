from .contact import ContactModel

__all__ = [
    "ContactModel",
]
