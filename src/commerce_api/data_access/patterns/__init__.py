from .unit_of_work import UnitOfWork, unit_of_work

__all__ = ["UnitOfWork", "unit_of_work"]
