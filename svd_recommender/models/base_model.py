#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
svd_recommender/models/base_model.py - Base scorer class for the SVD recommender
Author: YourName
Date: 2026-10-18
Description: Defines the abstract item scorer contract shared by baselines and the SVD scorer
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class BaseItemScorer(ABC):
    """Abstract base class for all item scorers"""

    @abstractmethod
    def fit(self, data):
        """Train the scorer with a ratings DataFrame"""
        pass

    @abstractmethod
    def score(self, user_id, items):
        """Score a set of items for a user

        Returns:
            dict: item ID -> score, covering exactly the requested items
        """
        pass

    def score_one(self, user_id, item_id):
        """Score a single user-item pair"""
        return self.score(user_id, [item_id])[item_id]
