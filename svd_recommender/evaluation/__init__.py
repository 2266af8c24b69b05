from .evaluator import RecommenderEvaluator

__all__ = ['RecommenderEvaluator']
