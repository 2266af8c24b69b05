"""
Data Access Module
==================

Event types, user histories, DAOs and rating file loading.
"""

from .dao import (
    Event,
    Rating,
    Purchase,
    UserHistory,
    HistoryCursor,
    UserDAO,
    ItemDAO,
    UserEventDAO,
    RatingFrameDAO,
    user_rating_vector,
)
from .data_processor import RatingDataProcessor

__all__ = [
    'Event',
    'Rating',
    'Purchase',
    'UserHistory',
    'HistoryCursor',
    'UserDAO',
    'ItemDAO',
    'UserEventDAO',
    'RatingFrameDAO',
    'user_rating_vector',
    'RatingDataProcessor',
]
