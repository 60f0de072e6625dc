from .contact_repository import SQLAlchemyContactRepository

__all__ = [
    "SQLAlchemyContactRepository",
]
