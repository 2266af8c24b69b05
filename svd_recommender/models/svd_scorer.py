#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
svd_recommender/models/svd_scorer.py - Item scorer backed by an SVD model
Author: YourName
Date: 2026-10-18
Description: Predicts ratings as baseline plus the weighted inner product of latent features
"""

import logging

import numpy as np

from .base_model import BaseItemScorer

logger = logging.getLogger(__name__)


class SVDItemScorer(BaseItemScorer):
    """Scores items with baseline + user_vec . diag(weights) . item_vec"""

    def __init__(self, model, baseline_scorer):
        """Initialize SVD scorer

        Args:
            model (SVDModel): Built SVD model
            baseline_scorer (BaseItemScorer): The baseline the model was normalized with
        """
        self.model = model
        self.baseline_scorer = baseline_scorer
        self._weights = np.diag(model.feature_weights)

    def fit(self, data):
        # The model is built by SVDModelBuilder
        return self

    def score(self, user_id, items):
        items = list(items)
        scores = dict(self.baseline_scorer.score(user_id, items))
        if user_id not in self.model.user_mapping:
            return scores

        known = [item for item in items if item in self.model.item_mapping]
        if not known:
            return scores

        user_vec = self.model.user_vector(user_id) * self._weights
        item_rows = self.model.item_mapping.get_indices(known)
        offsets = self.model.item_features[item_rows] @ user_vec
        for item, offset in zip(known, offsets):
            scores[item] += float(offset)
        return scores

    def recommend(self, user_id, candidates, n=10, exclude=None):
        """Generate top-N recommendations for a user

        Args:
            user_id: User ID
            candidates (iterable): Item IDs to rank
            n (int): Number of items to return
            exclude (iterable): Item IDs to leave out, e.g. already rated items

        Returns:
            list: (item ID, score) pairs, best first
        """
        exclude = set(exclude or ())
        items = [item for item in candidates if item not in exclude]
        if not items or n <= 0:
            return []

        scores = self.score(user_id, items)
        ranked = sorted(scores.items(), key=lambda x: (-x[1], x[0]))
        return ranked[:n]
