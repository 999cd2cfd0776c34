from .records import EntityRecord, Car, User, Subscription, ErrorDefinition

__all__ = ["EntityRecord", "Car", "User", "Subscription", "ErrorDefinition"]
