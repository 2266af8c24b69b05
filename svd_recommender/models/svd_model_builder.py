#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
svd_recommender/models/svd_model_builder.py - Builds the SVD model from rating data
Author: YourName
Date: 2026-10-18
Description: Normalizes ratings into a dense matrix, factorizes it and truncates to the top-K features
"""

import logging
import time
from collections import namedtuple

import numpy as np
from scipy import linalg

from .index_mapping import IdIndexMapping
from .svd_model import SVDModel
from ..data.dao import HistoryCursor, Rating, user_rating_vector
from ..errors import (InsufficientRankError, InvalidInputError, SVDRecommenderError,
                      UpstreamCollaboratorError)

logger = logging.getLogger(__name__)

TruncatedFactors = namedtuple('TruncatedFactors', ['user_features', 'item_features', 'feature_weights'])


def _check_feature_count(feature_count):
    if isinstance(feature_count, (bool, np.bool_)) or not isinstance(feature_count, (int, np.integer)):
        raise InvalidInputError(f"feature count must be an integer, got {feature_count!r}")
    if feature_count < 1:
        raise InvalidInputError(f"feature count must be positive, got {feature_count}")
    return int(feature_count)


def _baseline_scores(baseline_scorer, user_id, items):
    try:
        baselines = baseline_scorer.score(user_id, items)
    except SVDRecommenderError:
        raise
    except Exception as e:
        raise UpstreamCollaboratorError('baseline scorer', f"{type(e).__name__}: {e}") from e

    missing = [item for item in items if item not in baselines]
    if missing:
        raise UpstreamCollaboratorError(
            'baseline scorer', f"no baseline for user {user_id} and items {missing}"
        )
    return baselines


def _iter_histories(cursor):
    iterator = iter(cursor)
    while True:
        try:
            history = next(iterator)
        except StopIteration:
            return
        except SVDRecommenderError:
            raise
        except Exception as e:
            raise UpstreamCollaboratorError('history source', f"{type(e).__name__}: {e}") from e
        yield history


def create_rating_matrix(user_mapping, item_mapping, histories, baseline_scorer):
    """Build a matrix of baseline-normalized ratings

    Each user's ratings are normalized by subtracting the baseline score for
    the rated items. Unrated cells are 0.

    Args:
        user_mapping (IdIndexMapping): User ID to row number
        item_mapping (IdIndexMapping): Item ID to column number
        histories (HistoryCursor): Stream of user histories; closed on return.
            Other iterables are wrapped in a HistoryCursor and closed the same way
        baseline_scorer (BaseItemScorer): Baseline used to normalize ratings

    Returns:
        ndarray: users x items matrix of normalized ratings
    """
    nusers = user_mapping.size()
    nitems = item_mapping.size()

    logger.info(f"Creating {nusers} by {nitems} rating matrix")
    matrix = np.zeros((nusers, nitems), dtype=np.float64)

    if not isinstance(histories, HistoryCursor):
        try:
            histories = HistoryCursor(histories, on_close=getattr(histories, 'close', None))
        except TypeError as e:
            raise UpstreamCollaboratorError('history source', f"not iterable: {e}") from e

    n_ratings = 0
    with histories:
        for history in _iter_histories(histories):
            row = user_mapping.get_index(history.user_id)
            ratings = user_rating_vector(history.filter(Rating))
            if not ratings:
                continue

            items = list(ratings)
            columns = item_mapping.get_indices(items)
            baselines = _baseline_scores(baseline_scorer, history.user_id, items)
            values = np.array([ratings[item] - baselines[item] for item in items], dtype=np.float64)
            matrix[row, columns] = values
            n_ratings += len(items)

    logger.debug(f"Populated rating matrix with {n_ratings} ratings")
    return matrix


def factorize(matrix, feature_count, lapack_driver='gesdd'):
    """Factorize a rating matrix and keep the top-K singular components

    Singular values are re-sorted in descending order with a stable sort, so
    equal values keep the order the kernel returned them in.

    Args:
        matrix (ndarray): users x items matrix
        feature_count (int): Number of latent features K to keep
        lapack_driver (str): 'gesdd' or 'gesvd', passed to scipy.linalg.svd

    Returns:
        TruncatedFactors: user features (users x K), item features (items x K)
        and the K x K diagonal weight matrix

    Raises:
        InsufficientRankError: If K exceeds min(users, items)
    """
    feature_count = _check_feature_count(feature_count)
    matrix = np.asarray(matrix, dtype=np.float64)
    rank_bound = min(matrix.shape)
    if feature_count > rank_bound:
        raise InsufficientRankError(feature_count, rank_bound)

    start = time.time()
    u, s, vt = linalg.svd(matrix, full_matrices=False, lapack_driver=lapack_driver)
    logger.debug(f"SVD of {matrix.shape[0]}x{matrix.shape[1]} matrix took {time.time() - start:.3f}s")

    top = np.argsort(-s, kind='stable')[:feature_count]

    user_features = np.ascontiguousarray(u[:, top])
    item_features = np.ascontiguousarray(vt[top, :].T)
    feature_weights = np.diag(s[top])

    logger.info(f"Truncated {len(s)} singular values to {feature_count} "
                f"(kept {s[top][0]:.4f} .. {s[top][-1]:.4f})")
    return TruncatedFactors(user_features, item_features, feature_weights)


class SVDModelBuilder:
    """Model builder that computes the SVD model"""

    def __init__(self, user_event_dao, user_dao, item_dao, baseline_scorer, feature_count,
                 lapack_driver='gesdd'):
        """Initialize the model builder

        Args:
            user_event_dao (UserEventDAO): Source of user histories
            user_dao (UserDAO): Source of user IDs
            item_dao (ItemDAO): Source of item IDs
            baseline_scorer (BaseItemScorer): Baseline used to normalize ratings
            feature_count (int): Number of latent features to keep
            lapack_driver (str): LAPACK routine used by the SVD kernel
        """
        self.user_event_dao = user_event_dao
        self.user_dao = user_dao
        self.item_dao = item_dao
        self.baseline_scorer = baseline_scorer
        self.feature_count = _check_feature_count(feature_count)
        self.lapack_driver = lapack_driver

    def build(self):
        """Build the SVD model

        Returns:
            SVDModel: The truncated singular value decomposition model
        """
        user_mapping = IdIndexMapping.create(self.user_dao.get_user_ids(), kind='user')
        logger.debug(f"Indexed {user_mapping.size()} users")
        item_mapping = IdIndexMapping.create(self.item_dao.get_item_ids(), kind='item')
        logger.debug(f"Indexed {item_mapping.size()} items")

        # Fail before streaming histories if the rank bound is already too small
        rank_bound = min(user_mapping.size(), item_mapping.size())
        if self.feature_count > rank_bound:
            raise InsufficientRankError(self.feature_count, rank_bound)

        try:
            histories = self.user_event_dao.stream_events_by_user()
        except SVDRecommenderError:
            raise
        except Exception as e:
            raise UpstreamCollaboratorError('history source', f"{type(e).__name__}: {e}") from e

        matrix = create_rating_matrix(user_mapping, item_mapping, histories, self.baseline_scorer)
        factors = factorize(matrix, self.feature_count, self.lapack_driver)

        return SVDModel.assemble(user_mapping, item_mapping, *factors)


def build_model(feature_count, *, user_dao, item_dao, user_event_dao, baseline_scorer,
                lapack_driver='gesdd'):
    """Build an SVD model with the given number of latent features"""
    builder = SVDModelBuilder(user_event_dao, user_dao, item_dao, baseline_scorer,
                              feature_count, lapack_driver=lapack_driver)
    return builder.build()
