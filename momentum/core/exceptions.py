"""
Custom Exceptions - Application-specific error types
"""


class MomentumException(Exception):
    """Base exception for all momentum errors"""
    pass


class GoalNotFoundError(MomentumException):
    """Raised when a goal cannot be found"""
    pass


class InvalidGoalDataError(MomentumException):
    """Raised when goal data validation fails"""
    pass


class CheckInNotFoundError(MomentumException):
    """Raised when a check-in cannot be found"""
    pass


class DuplicateCheckInError(MomentumException):
    """Raised when a goal already has a check-in for the given date"""
    pass


class InvalidCheckInError(MomentumException):
    """Raised when a check-in date is in the future"""
    pass


class InvalidPointsDataError(MomentumException):
    """Raised when a points action or habit type is not recognised"""
    pass


class InvalidLevelTableError(MomentumException):
    """Raised when level thresholds are empty or not strictly ascending"""
    pass


class DatabaseError(MomentumException):
    """Raised when database operations fail"""
    pass
