from .date_fields import JalaliDateFormField

__all__ = ["JalaliDateFormField"]
