#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
svd_recommender/data/data_processor.py - Rating data processing module
Author: YourName
Date: 2026-10-18
Description: Loads rating CSV files and splits them into train and test sets
"""

import logging

import pandas as pd
from sklearn.model_selection import train_test_split

from .dao import RatingFrameDAO
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)


class RatingDataProcessor:
    """Data processor for rating data"""

    def __init__(self, config=None):
        """Initialize data processor

        Args:
            config (dict): Column names (user_col, item_col, rating_col, timestamp_col)
        """
        self.config = {
            'user_col': 'user_id',
            'item_col': 'item_id',
            'rating_col': 'rating',
            'timestamp_col': None,
        }
        if config:
            self.config.update(config)

        self.df = None
        self.train_df = None
        self.test_df = None

    @property
    def required_columns(self):
        columns = [self.config['user_col'], self.config['item_col'], self.config['rating_col']]
        if self.config['timestamp_col']:
            columns.append(self.config['timestamp_col'])
        return columns

    def load_data(self, data_path):
        """Load ratings from a CSV file

        Returns:
            DataFrame: The cleaned ratings
        """
        logger.info(f"Loading ratings from {data_path}")
        df = pd.read_csv(data_path)
        return self.load_frame(df)

    def load_frame(self, df):
        """Validate and clean an in-memory ratings frame"""
        missing = [col for col in self.required_columns if col not in df.columns]
        if missing:
            raise InvalidInputError(f"ratings data missing required columns: {missing}")

        key_cols = self.required_columns[:3]
        n_before = len(df)
        df = df.dropna(subset=key_cols).copy()
        if len(df) < n_before:
            logger.warning(f"Dropped {n_before - len(df)} rows with missing user, item or rating")

        df[key_cols[0]] = df[key_cols[0]].astype('int64')
        df[key_cols[1]] = df[key_cols[1]].astype('int64')
        df[key_cols[2]] = df[key_cols[2]].astype('float64')

        logger.info(f"Loaded {len(df):,} ratings | {df[key_cols[0]].nunique():,} users | "
                    f"{df[key_cols[1]].nunique():,} items")
        self.df = df
        return df

    def split(self, test_size=0.2, random_state=42):
        """Split the loaded ratings into train and test frames"""
        if self.df is None:
            raise RuntimeError("No data loaded")

        if test_size <= 0:
            self.train_df, self.test_df = self.df, self.df.iloc[0:0]
        else:
            self.train_df, self.test_df = train_test_split(
                self.df, test_size=test_size, random_state=random_state
            )
        logger.info(f"Split data: {len(self.train_df)} train / {len(self.test_df)} test ratings")
        return self.train_df, self.test_df

    def to_dao(self, df=None):
        """Wrap a ratings frame (default: the training split) in a DAO"""
        if df is None:
            df = self.train_df if self.train_df is not None else self.df
        if df is None:
            raise RuntimeError("No data loaded")

        return RatingFrameDAO(
            df,
            user_col=self.config['user_col'],
            item_col=self.config['item_col'],
            rating_col=self.config['rating_col'],
            timestamp_col=self.config['timestamp_col'],
        )
