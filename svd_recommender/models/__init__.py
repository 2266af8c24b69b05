"""
Model Implementations
=====================

- ID index mappings between IDs and matrix rows/columns
- Baseline scorers used to normalize ratings
- The SVD model, its builder and the SVD item scorer
"""

from .base_model import BaseItemScorer
from .baseline import (
    ConstantScorer,
    GlobalMeanScorer,
    ItemMeanScorer,
    UserMeanScorer,
    create_baseline,
)
from .index_mapping import IdIndexMapping
from .svd_model import SVDModel
from .svd_model_builder import (
    SVDModelBuilder,
    TruncatedFactors,
    build_model,
    create_rating_matrix,
    factorize,
)
from .svd_scorer import SVDItemScorer

__all__ = [
    'BaseItemScorer',
    'ConstantScorer',
    'GlobalMeanScorer',
    'ItemMeanScorer',
    'UserMeanScorer',
    'create_baseline',
    'IdIndexMapping',
    'SVDModel',
    'SVDModelBuilder',
    'TruncatedFactors',
    'build_model',
    'create_rating_matrix',
    'factorize',
    'SVDItemScorer',
]
