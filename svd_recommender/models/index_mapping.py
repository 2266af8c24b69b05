#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
svd_recommender/models/index_mapping.py - ID to matrix index mapping
Author: YourName
Date: 2026-10-18
Description: Bidirectional mapping between user/item IDs and dense row/column indices
"""

import numpy as np

from ..data.dao import as_id
from ..errors import InvalidInputError, UnknownIdError


class IdIndexMapping:
    """Immutable mapping of IDs to contiguous indices 0..n-1

    Indices are assigned in the order the IDs are enumerated.
    """

    __slots__ = ('_ids', '_index', '_kind')

    def __init__(self, ids, index, kind='id'):
        # Use IdIndexMapping.create; this does not validate its arguments
        object.__setattr__(self, '_ids', ids)
        object.__setattr__(self, '_index', index)
        object.__setattr__(self, '_kind', kind)

    @classmethod
    def create(cls, ids, kind='id'):
        """Build a mapping from an enumeration of unique IDs

        Args:
            ids (iterable): Ordered integral IDs; numpy integers are accepted
            kind (str): Label used in error messages ('user' or 'item')

        Returns:
            IdIndexMapping: The new mapping

        Raises:
            InvalidInputError: If an ID is not integral or appears more than once
        """
        ordered = []
        index = {}
        for raw_id in ids:
            id_ = as_id(raw_id)
            if id_ is None:
                raise InvalidInputError(f"{kind} ID is not an integer: {raw_id!r}")
            if id_ in index:
                raise InvalidInputError(f"duplicate {kind} ID in enumeration: {id_}")
            index[id_] = len(ordered)
            ordered.append(id_)
        return cls(tuple(ordered), index, kind)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def kind(self):
        return self._kind

    @property
    def ids(self):
        """IDs in index order"""
        return self._ids

    def size(self):
        return len(self._ids)

    def __len__(self):
        return len(self._ids)

    def __contains__(self, id_):
        key = as_id(id_)
        return key is not None and key in self._index

    def __iter__(self):
        return iter(self._ids)

    def __eq__(self, other):
        if not isinstance(other, IdIndexMapping):
            return NotImplemented
        return self._ids == other._ids

    def __hash__(self):
        return hash(self._ids)

    def __repr__(self):
        return f"IdIndexMapping(kind={self._kind!r}, size={len(self._ids)})"

    def get_index(self, id_):
        """Get the index of an ID

        Raises:
            UnknownIdError: If the ID was not in the enumeration
        """
        index = self._index.get(as_id(id_))
        if index is None:
            raise UnknownIdError(self._kind, id_)
        return index

    def get_id(self, index):
        """Get the ID stored at an index (inverse of get_index)"""
        if not 0 <= index < len(self._ids):
            raise UnknownIdError(f"{self._kind} index", index)
        return self._ids[index]

    def get_indices(self, ids):
        """Vectorised get_index, returned as an int64 array"""
        return np.array([self.get_index(id_) for id_ in ids], dtype=np.int64)
