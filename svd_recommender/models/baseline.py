#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
svd_recommender/models/baseline.py - Baseline rating scorers
Author: YourName
Date: 2026-10-18
Description: Mean-based scorers used to normalize ratings before factorization
"""

import logging

import numpy as np

from .base_model import BaseItemScorer
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)


class _FittedScorer(BaseItemScorer):
    """Shared column handling for scorers trained on a ratings DataFrame"""

    def __init__(self, user_col='user_id', item_col='item_id', rating_col='rating'):
        self.user_col = user_col
        self.item_col = item_col
        self.rating_col = rating_col
        self.global_mean = None

    def _check_fitted(self):
        if self.global_mean is None:
            raise RuntimeError(f"{type(self).__name__} has not been fitted")

    def _ratings(self, data):
        df = data[[self.user_col, self.item_col, self.rating_col]].dropna()
        if len(df) == 0:
            raise InvalidInputError("cannot fit a baseline on an empty ratings frame")
        return df


class ConstantScorer(BaseItemScorer):
    """Scores every item with the same value"""

    def __init__(self, value=0.0):
        self.value = float(value)

    def fit(self, data):
        return self

    def score(self, user_id, items):
        return {item: self.value for item in items}


class GlobalMeanScorer(_FittedScorer):
    """Scores every item with the mean of all ratings"""

    def fit(self, data):
        df = self._ratings(data)
        self.global_mean = float(df[self.rating_col].mean())
        logger.info(f"Global mean rating: {self.global_mean:.4f}")
        return self

    def score(self, user_id, items):
        self._check_fitted()
        return {item: self.global_mean for item in items}


class ItemMeanScorer(_FittedScorer):
    """Scores items by their damped mean rating"""

    def __init__(self, damping=0.0, **columns):
        """Initialize item mean scorer

        Args:
            damping (float): Pseudo-count of global-mean ratings added to every item
        """
        super().__init__(**columns)
        self.damping = float(damping)
        self.item_offsets = {}

    def fit(self, data):
        df = self._ratings(data)
        self.global_mean = float(df[self.rating_col].mean())

        residuals = df[self.rating_col] - self.global_mean
        grouped = residuals.groupby(df[self.item_col])
        offsets = grouped.sum() / (grouped.count() + self.damping)
        self.item_offsets = {int(item): float(offset) for item, offset in offsets.items()}

        logger.info(f"Computed item mean baselines for {len(self.item_offsets)} items "
                    f"(damping={self.damping})")
        return self

    def score(self, user_id, items):
        self._check_fitted()
        return {item: self.global_mean + self.item_offsets.get(item, 0.0) for item in items}


class UserMeanScorer(_FittedScorer):
    """Adds each user's damped mean offset to a base scorer

    The offset is the user's mean difference between their ratings and the
    base scorer's predictions.
    """

    def __init__(self, base=None, damping=0.0, **columns):
        super().__init__(**columns)
        self.base = base if base is not None else ItemMeanScorer(**columns)
        self.damping = float(damping)
        self.user_offsets = {}

    def fit(self, data):
        df = self._ratings(data)
        self.base.fit(data)
        self.global_mean = float(df[self.rating_col].mean())

        self.user_offsets = {}
        for user_id, group in df.groupby(self.user_col):
            items = [int(i) for i in group[self.item_col]]
            base_scores = self.base.score(user_id, items)
            predicted = np.array([base_scores[i] for i in items])
            residual = group[self.rating_col].to_numpy(dtype=float) - predicted
            self.user_offsets[int(user_id)] = float(residual.sum() / (len(residual) + self.damping))

        logger.info(f"Computed user mean offsets for {len(self.user_offsets)} users "
                    f"(damping={self.damping})")
        return self

    def score(self, user_id, items):
        self._check_fitted()
        offset = self.user_offsets.get(user_id, 0.0)
        return {item: value + offset for item, value in self.base.score(user_id, items).items()}


def create_baseline(config=None):
    """Create an unfitted baseline scorer from a config section

    Args:
        config (dict): {'type': ..., 'damping': ..., 'value': ...} plus optional column names

    Returns:
        BaseItemScorer: The baseline scorer
    """
    config = dict(config or {})
    kind = config.pop('type', 'user_item_mean')
    damping = config.pop('damping', 0.0)
    value = config.pop('value', 0.0)
    columns = {k: v for k, v in config.items() if k in ('user_col', 'item_col', 'rating_col')}

    if kind == 'constant':
        return ConstantScorer(value)
    if kind == 'global_mean':
        return GlobalMeanScorer(**columns)
    if kind == 'item_mean':
        return ItemMeanScorer(damping=damping, **columns)
    if kind == 'user_item_mean':
        return UserMeanScorer(ItemMeanScorer(damping=damping, **columns), damping=damping, **columns)
    raise InvalidInputError(f"unknown baseline type: {kind}")
