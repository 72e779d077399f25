from .mixins import ValidatorMixin

__all__ = ["ValidatorMixin"]
