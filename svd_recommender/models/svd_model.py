#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
svd_recommender/models/svd_model.py - Matrix factorization model based on SVD
Author: YourName
Date: 2026-10-18
Description: Immutable model holding the truncated SVD feature matrices and ID mappings
"""

import logging

import numpy as np

from ..errors import InternalConsistencyError

logger = logging.getLogger(__name__)


def _frozen(matrix):
    array = np.array(matrix, dtype=np.float64, copy=True)
    array.flags.writeable = False
    return array


class SVDModel:
    """Truncated SVD of a baseline-normalized rating matrix

    Row u of user_features and row i of item_features are the latent
    feature vectors of the u-th user and i-th item; feature_weights is the
    K x K diagonal matrix of singular values, largest first.
    """

    __slots__ = ('_user_mapping', '_item_mapping', '_user_features',
                 '_item_features', '_feature_weights')

    def __init__(self, user_mapping, item_mapping, user_features, item_features, feature_weights):
        """Initialize SVD model

        Args:
            user_mapping (IdIndexMapping): User ID to row index
            item_mapping (IdIndexMapping): Item ID to row index
            user_features (ndarray): users x K matrix
            item_features (ndarray): items x K matrix
            feature_weights (ndarray): K x K diagonal matrix

        Raises:
            InternalConsistencyError: If the matrix shapes disagree with the mappings
        """
        user_features = np.asarray(user_features)
        item_features = np.asarray(item_features)
        feature_weights = np.asarray(feature_weights)

        if user_features.ndim != 2 or item_features.ndim != 2 or feature_weights.ndim != 2:
            raise InternalConsistencyError("feature matrices must be two-dimensional")

        n_features = feature_weights.shape[0]
        expected = {
            'user_features': (user_mapping.size(), n_features),
            'item_features': (item_mapping.size(), n_features),
            'feature_weights': (n_features, n_features),
        }
        actual = {
            'user_features': user_features.shape,
            'item_features': item_features.shape,
            'feature_weights': feature_weights.shape,
        }
        for name, shape in expected.items():
            if tuple(actual[name]) != shape:
                raise InternalConsistencyError(
                    f"{name} has shape {tuple(actual[name])}, expected {shape}"
                )
        if np.count_nonzero(feature_weights - np.diag(np.diag(feature_weights))):
            raise InternalConsistencyError("feature_weights must be diagonal")

        object.__setattr__(self, '_user_mapping', user_mapping)
        object.__setattr__(self, '_item_mapping', item_mapping)
        object.__setattr__(self, '_user_features', _frozen(user_features))
        object.__setattr__(self, '_item_features', _frozen(item_features))
        object.__setattr__(self, '_feature_weights', _frozen(feature_weights))

    @classmethod
    def assemble(cls, user_mapping, item_mapping, user_features, item_features, feature_weights):
        """Package mappings and truncated factors into a model"""
        model = cls(user_mapping, item_mapping, user_features, item_features, feature_weights)
        logger.info(f"Assembled SVD model: {user_mapping.size()} users, "
                    f"{item_mapping.size()} items, {model.feature_count} features")
        return model

    def __setattr__(self, name, value):
        raise AttributeError("SVDModel is immutable")

    def __repr__(self):
        return (f"SVDModel(users={self._user_mapping.size()}, "
                f"items={self._item_mapping.size()}, features={self.feature_count})")

    @property
    def user_mapping(self):
        return self._user_mapping

    @property
    def item_mapping(self):
        return self._item_mapping

    @property
    def user_features(self):
        return self._user_features

    @property
    def item_features(self):
        return self._item_features

    @property
    def feature_weights(self):
        return self._feature_weights

    @property
    def feature_count(self):
        return self._feature_weights.shape[0]

    def lookup_user_index(self, user_id):
        return self._user_mapping.get_index(user_id)

    def lookup_item_index(self, item_id):
        return self._item_mapping.get_index(item_id)

    def user_feature_vector(self, index):
        """K latent features of the user at a row index"""
        return self._user_features[self._check_row(index, self._user_features)]

    def item_feature_vector(self, index):
        """K latent features of the item at a row index"""
        return self._item_features[self._check_row(index, self._item_features)]

    def feature_weight(self, index):
        """Singular value of the index-th feature"""
        index = self._check_row(index, self._feature_weights)
        return float(self._feature_weights[index, index])

    def user_vector(self, user_id):
        return self._user_features[self.lookup_user_index(user_id)]

    def item_vector(self, item_id):
        return self._item_features[self.lookup_item_index(item_id)]

    @staticmethod
    def _check_row(index, matrix):
        # Negative indices would silently wrap around
        if not 0 <= index < matrix.shape[0]:
            raise IndexError(f"index {index} out of range for {matrix.shape[0]} rows")
        return index
