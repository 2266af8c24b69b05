#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
svd_recommender/data/dao.py - Data access objects for rating data
Author: YourName
Date: 2026-10-18
Description: Event types, user histories and the DAO contracts consumed by the model builder
"""

import logging
from abc import ABC, abstractmethod

import numpy as np
import pandas as pd

from ..errors import InvalidInputError

logger = logging.getLogger(__name__)


def as_id(value):
    """Normalise an integral user/item ID to int

    Integer types and integral floats are accepted. Returns None for
    anything else, including booleans and fractional values.
    """
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)) and np.isfinite(value) and value == int(value):
        return int(value)
    return None


def _event_id(value):
    # Non-integral IDs are kept as given so that index lookups reject them
    id_ = as_id(value)
    return value if id_ is None else id_


class Event:
    """A single user-item interaction"""

    __slots__ = ('user_id', 'item_id', 'timestamp')

    def __init__(self, user_id, item_id, timestamp=None):
        self.user_id = _event_id(user_id)
        self.item_id = _event_id(item_id)
        self.timestamp = timestamp

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, s) == getattr(other, s) for s in self._fields())

    def __hash__(self):
        return hash(tuple(getattr(self, s) for s in self._fields()))

    def __repr__(self):
        values = ', '.join(f"{s}={getattr(self, s)!r}" for s in self._fields())
        return f"{type(self).__name__}({values})"

    @classmethod
    def _fields(cls):
        fields = []
        for klass in reversed(cls.__mro__):
            fields.extend(getattr(klass, '__slots__', ()))
        return fields


class Rating(Event):
    """An explicit rating; a value of None un-rates the item"""

    __slots__ = ('value',)

    def __init__(self, user_id, item_id, value, timestamp=None):
        super().__init__(user_id, item_id, timestamp)
        self.value = None if value is None else float(value)


class Purchase(Event):
    """An implicit interaction that carries no rating value"""

    __slots__ = ()


def user_rating_vector(ratings):
    """Collapse a user's rating events into a sparse item -> value dict

    Events are applied in order, so the later of two ratings for an item
    wins. A timestamped rating older than the newest timestamp already seen
    for that item is skipped; untimestamped ratings always apply and leave
    the newest timestamp unchanged. A rating with value None removes the item.

    Args:
        ratings (iterable): Rating events of a single user

    Returns:
        dict: item ID -> rating value
    """
    values = {}
    newest = {}
    for rating in ratings:
        item = rating.item_id
        if rating.timestamp is not None:
            latest = newest.get(item)
            if latest is not None and rating.timestamp < latest:
                continue
            newest[item] = rating.timestamp
        if rating.value is None:
            values.pop(item, None)
        else:
            values[item] = rating.value
    return values


class UserHistory:
    """All events of one user"""

    def __init__(self, user_id, events=()):
        self.user_id = _event_id(user_id)
        self.events = list(events)

    def __iter__(self):
        return iter(self.events)

    def __len__(self):
        return len(self.events)

    def __repr__(self):
        return f"UserHistory(user_id={self.user_id}, events={len(self.events)})"

    def filter(self, event_type):
        """Events of the given type, in history order"""
        return [e for e in self.events if isinstance(e, event_type)]


class HistoryCursor:
    """Single-pass stream of user histories that must be closed

    Usable as a context manager; close() runs the optional on_close hook once.
    """

    def __init__(self, histories, on_close=None):
        self._iterator = iter(histories)
        self._on_close = on_close
        self.closed = False

    def __iter__(self):
        return self

    def __next__(self):
        if self.closed:
            raise RuntimeError("cursor is closed")
        return next(self._iterator)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        if self.closed:
            return
        self.closed = True
        close_iterator = getattr(self._iterator, 'close', None)
        if close_iterator is not None:
            close_iterator()
        if self._on_close is not None:
            self._on_close()


class UserDAO(ABC):
    """Source of the user ID universe"""

    @abstractmethod
    def get_user_ids(self):
        """Ordered sequence of unique user IDs"""
        pass


class ItemDAO(ABC):
    """Source of the item ID universe"""

    @abstractmethod
    def get_item_ids(self):
        """Ordered sequence of unique item IDs"""
        pass


class UserEventDAO(ABC):
    """Source of per-user event histories"""

    @abstractmethod
    def stream_events_by_user(self):
        """Open a HistoryCursor over one UserHistory per user"""
        pass


class RatingFrameDAO(UserDAO, ItemDAO, UserEventDAO):
    """DAO backed by a pandas DataFrame of ratings"""

    def __init__(self, ratings_df, user_col='user_id', item_col='item_id',
                 rating_col='rating', timestamp_col=None):
        """Initialize the DAO

        Args:
            ratings_df (DataFrame): One row per rating event
            user_col (str): User ID column
            item_col (str): Item ID column
            rating_col (str): Rating value column
            timestamp_col (str): Optional timestamp column
        """
        required = [user_col, item_col, rating_col]
        if timestamp_col:
            required.append(timestamp_col)
        missing = [col for col in required if col not in ratings_df.columns]
        if missing:
            raise InvalidInputError(f"ratings frame missing required columns: {missing}")

        self.ratings_df = ratings_df
        self.user_col = user_col
        self.item_col = item_col
        self.rating_col = rating_col
        self.timestamp_col = timestamp_col

    @classmethod
    def from_records(cls, records):
        """Build from (user, item, rating[, timestamp]) tuples"""
        records = list(records)
        with_time = any(len(r) > 3 for r in records)
        columns = ['user_id', 'item_id', 'rating']
        if with_time:
            columns.append('timestamp')
            records = [tuple(r) + (None,) * (4 - len(r)) for r in records]
        df = pd.DataFrame.from_records(records, columns=columns)
        return cls(df, timestamp_col='timestamp' if with_time else None)

    def get_user_ids(self):
        return sorted(self.ratings_df[self.user_col].unique().tolist())

    def get_item_ids(self):
        return sorted(self.ratings_df[self.item_col].unique().tolist())

    def stream_events_by_user(self):
        logger.debug(f"Streaming {len(self.ratings_df)} rating events by user")
        return HistoryCursor(self._iter_histories())

    def _iter_histories(self):
        df = self.ratings_df
        if self.timestamp_col:
            df = df.sort_values(self.timestamp_col, kind='mergesort', na_position='first')

        columns = [self.item_col, self.rating_col]
        if self.timestamp_col:
            columns.append(self.timestamp_col)

        for user_id, group in df.groupby(self.user_col, sort=True):
            events = []
            for row in group[columns].itertuples(index=False, name=None):
                value = row[1]
                timestamp = row[2] if self.timestamp_col else None
                if timestamp is not None and pd.isna(timestamp):
                    timestamp = None
                events.append(Rating(user_id, row[0], None if pd.isna(value) else value, timestamp))
            yield UserHistory(user_id, events)
