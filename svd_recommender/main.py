#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
svd_recommender/main.py - Main entry point for the SVD recommender
Author: YourName
Date: 2026-10-18
Description: Command-line interface for building and evaluating SVD models
"""

import argparse
import logging
import os
import sys

from .errors import SVDRecommenderError
from .recommender import SVDRecommender, load_config


def setup_logging(level=logging.INFO):
    """Set up logging configuration"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='SVD Rating Recommender')
    parser.add_argument('--data', type=str, required=True, help='Ratings CSV path')
    parser.add_argument('--config', type=str, default=None, help='Configuration file path')
    parser.add_argument('--features', type=int, default=None, help='Number of latent features')
    parser.add_argument('--mode', type=str, default='evaluate',
                        choices=['build', 'evaluate', 'recommend'],
                        help='Operation mode')
    parser.add_argument('--user', type=int, default=None, help='User ID for recommend mode')
    parser.add_argument('--n', type=int, default=None, help='Number of recommendations')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    config = {}
    if args.config and os.path.exists(args.config):
        config = load_config(args.config)
    elif args.config:
        logging.warning(f"Configuration file {args.config} not found, using defaults")

    if args.mode != 'evaluate':
        # Build and recommend use every rating
        config['test_size'] = 0

    recommender = SVDRecommender(args.data, config)

    try:
        recommender.load_data()
        model = recommender.train_model(args.features)

        if args.mode == 'build':
            print(f"\nBuilt {model!r}")
            print("Feature weights: " + ", ".join(
                f"{model.feature_weight(i):.4f}" for i in range(model.feature_count)))

        elif args.mode == 'evaluate':
            results = recommender.evaluate()
            print("\nEvaluation Results:")
            for metric, value in results.items():
                print(f"  {metric}: {value:.4f}" if isinstance(value, float) else f"  {metric}: {value}")

        elif args.mode == 'recommend':
            if args.user is None:
                logging.error("Recommendation requires --user")
                return 1
            recommendations = recommender.recommend(args.user, args.n)
            print(f"\nTop {len(recommendations)} recommendations for user {args.user}:")
            for i, (item_id, score) in enumerate(recommendations, 1):
                print(f"{i}. Item {item_id} (Score: {score:.4f})")

    except SVDRecommenderError as e:
        logging.error(f"Build failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
