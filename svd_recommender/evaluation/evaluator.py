#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
svd_recommender/evaluation/evaluator.py - Model evaluation module
Author: YourName
Date: 2026-10-18
Description: Rating prediction accuracy metrics for item scorers
"""

import logging

import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error
from tqdm import tqdm

from ..errors import InvalidInputError

logger = logging.getLogger(__name__)


class RecommenderEvaluator:
    """Evaluator for rating prediction accuracy"""

    def __init__(self, user_col='user_id', item_col='item_id', rating_col='rating',
                 show_progress=True):
        self.user_col = user_col
        self.item_col = item_col
        self.rating_col = rating_col
        self.show_progress = show_progress
        self.results = None

    def predict(self, scorer, test_df):
        """Predict every rating in the test frame, in frame order"""
        predictions = np.empty(len(test_df), dtype=np.float64)
        positions = {idx: pos for pos, idx in enumerate(test_df.index)}

        groups = test_df.groupby(self.user_col)
        for user_id, group in tqdm(groups, desc="Evaluating users", disable=not self.show_progress):
            items = [int(i) for i in group[self.item_col]]
            scores = scorer.score(int(user_id), set(items))
            for idx, item in zip(group.index, items):
                predictions[positions[idx]] = scores[item]
        return predictions

    def evaluate(self, scorer, test_df, baseline=None):
        """Evaluate a scorer on held-out ratings

        Args:
            scorer (BaseItemScorer): Scorer to evaluate
            test_df (DataFrame): Held-out ratings
            baseline (BaseItemScorer): Optional scorer to compare against

        Returns:
            dict: rmse, mae, n_ratings, n_users and baseline metrics if given
        """
        if test_df is None or len(test_df) == 0:
            raise InvalidInputError("cannot evaluate on an empty test set")

        test_df = test_df.reset_index(drop=True)
        logger.info(f"Evaluating on {len(test_df)} ratings from "
                    f"{test_df[self.user_col].nunique()} users")

        actual = test_df[self.rating_col].to_numpy(dtype=np.float64)
        predicted = self.predict(scorer, test_df)

        results = {
            'rmse': float(np.sqrt(mean_squared_error(actual, predicted))),
            'mae': float(mean_absolute_error(actual, predicted)),
            'n_ratings': int(len(test_df)),
            'n_users': int(test_df[self.user_col].nunique()),
        }

        if baseline is not None:
            baseline_predicted = self.predict(baseline, test_df)
            results['baseline_rmse'] = float(np.sqrt(mean_squared_error(actual, baseline_predicted)))
            results['baseline_mae'] = float(mean_absolute_error(actual, baseline_predicted))
            results['rmse_improvement'] = results['baseline_rmse'] - results['rmse']

        logger.info(f"RMSE: {results['rmse']:.4f} | MAE: {results['mae']:.4f}")
        self.results = results
        return results
