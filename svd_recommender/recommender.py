#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
svd_recommender/recommender.py - Main SVD recommender system
Author: YourName
Date: 2026-10-18
Description: Main class that wires data loading, baseline, SVD model building and evaluation
"""

import copy
import json
import logging
import traceback

from .data.data_processor import RatingDataProcessor
from .evaluation.evaluator import RecommenderEvaluator
from .models.baseline import create_baseline
from .models.svd_model_builder import SVDModelBuilder
from .models.svd_scorer import SVDItemScorer

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'data': {
        'user_col': 'user_id',
        'item_col': 'item_id',
        'rating_col': 'rating',
        'timestamp_col': None,
    },
    'svd_params': {
        'feature_count': 25,
        'lapack_driver': 'gesdd',
    },
    'baseline': {
        'type': 'user_item_mean',
        'damping': 5.0,
    },
    'test_size': 0.2,
    'random_state': 42,
    'n_recommendations': 10,
}


def merge_config(base, overrides):
    """Merge overrides into a copy of base, nested sections one level deep"""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(config_path):
    """Load a JSON configuration file"""
    with open(config_path, 'r', encoding='utf-8') as f:
        return json.load(f)


class SVDRecommender:
    """SVD recommendation system main class"""

    def __init__(self, data_path=None, config=None):
        """Initialize recommendation system

        Args:
            data_path (str): Ratings CSV path
            config (dict): Configuration overrides
        """
        self.config = merge_config(DEFAULT_CONFIG, config)
        self.data_path = data_path

        data_config = self.config['data']
        self.data_processor = RatingDataProcessor(data_config)
        self.evaluator = RecommenderEvaluator(
            user_col=data_config['user_col'],
            item_col=data_config['item_col'],
            rating_col=data_config['rating_col'],
        )

        self.baseline = None
        self.model = None
        self.scorer = None
        self.evaluation_results = None

    def load_data(self, df=None):
        """Load ratings from the data path (or a given frame) and split them"""
        try:
            if df is not None:
                self.data_processor.load_frame(df)
            else:
                logger.info(f"Loading data from {self.data_path}")
                self.data_processor.load_data(self.data_path)
            return self.data_processor.split(self.config['test_size'], self.config['random_state'])
        except Exception as e:
            logger.error(f"Error loading data: {str(e)}")
            raise

    def train_model(self, feature_count=None):
        """Fit the baseline and build the SVD model on the training split"""
        train_df = self.data_processor.train_df
        if train_df is None:
            raise RuntimeError("No training data available, please load data first")

        if feature_count is None:
            feature_count = self.config['svd_params']['feature_count']
        baseline_config = dict(self.config['baseline'])
        for col in ('user_col', 'item_col', 'rating_col'):
            baseline_config.setdefault(col, self.config['data'][col])

        try:
            logger.info(f"Fitting {baseline_config['type']} baseline")
            self.baseline = create_baseline(baseline_config).fit(train_df)

            dao = self.data_processor.to_dao(train_df)
            builder = SVDModelBuilder(
                dao, dao, dao, self.baseline, feature_count,
                lapack_driver=self.config['svd_params']['lapack_driver'],
            )
            logger.info(f"Building SVD model with {feature_count} features")
            self.model = builder.build()
            self.scorer = SVDItemScorer(self.model, self.baseline)
            return self.model
        except Exception as e:
            logger.error(f"Error training SVD model: {str(e)}")
            logger.debug(traceback.format_exc())
            raise

    def evaluate(self):
        """Evaluate the SVD scorer against its baseline on the test split"""
        if self.scorer is None:
            raise RuntimeError("Model is not trained")

        test_df = self.data_processor.test_df
        try:
            self.evaluation_results = self.evaluator.evaluate(self.scorer, test_df, baseline=self.baseline)
            return self.evaluation_results
        except Exception as e:
            logger.error(f"Error evaluating model: {str(e)}")
            raise

    def recommend(self, user_id, n=None):
        """Top-N unrated items for a user"""
        if self.scorer is None:
            raise RuntimeError("Model is not trained")

        if n is None:
            n = self.config['n_recommendations']
        df = self.data_processor.df
        user_col = self.config['data']['user_col']
        item_col = self.config['data']['item_col']
        rated = set(df.loc[df[user_col] == user_id, item_col].astype(int))

        return self.scorer.recommend(user_id, self.model.item_mapping.ids, n=n, exclude=rated)
