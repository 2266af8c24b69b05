"""
SVD Rating Recommender
======================

Builds a latent-factor recommendation model from user-item ratings using a
truncated Singular Value Decomposition of the baseline-normalized rating
matrix.

This package provides tools for:
- Rating data access and loading
- Baseline scoring
- SVD model building and scoring
- Accuracy evaluation
"""

from .errors import (
    SVDRecommenderError,
    InvalidInputError,
    UnknownIdError,
    InsufficientRankError,
    InternalConsistencyError,
    UpstreamCollaboratorError,
)
from .models import IdIndexMapping, SVDModel, SVDModelBuilder, SVDItemScorer, build_model

__all__ = [
    'SVDRecommenderError',
    'InvalidInputError',
    'UnknownIdError',
    'InsufficientRankError',
    'InternalConsistencyError',
    'UpstreamCollaboratorError',
    'IdIndexMapping',
    'SVDModel',
    'SVDModelBuilder',
    'SVDItemScorer',
    'build_model',
]
