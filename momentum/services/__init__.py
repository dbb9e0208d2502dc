"""
Business logic services
"""
from . import goals
from . import points
from . import scheduler

__all__ = [
    'goals',
    'points',
    'scheduler'
]
