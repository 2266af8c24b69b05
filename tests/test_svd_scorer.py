import numpy as np
import pytest

from svd_recommender.models.baseline import ConstantScorer
from svd_recommender.models.index_mapping import IdIndexMapping
from svd_recommender.models.svd_model import SVDModel
from svd_recommender.models.svd_scorer import SVDItemScorer


@pytest.fixture
def scorer():
    model = SVDModel.assemble(
        IdIndexMapping.create([1, 2], kind='user'),
        IdIndexMapping.create([10, 20, 30], kind='item'),
        np.array([[1.0, 0.0], [0.0, 1.0]]),
        np.array([[0.5, 1.0], [1.0, 0.0], [0.0, 0.25]]),
        np.diag([2.0, 1.0]),
    )
    return SVDItemScorer(model, ConstantScorer(3.0))


def test_score_adds_weighted_inner_product(scorer):
    scores = scorer.score(1, [10, 20, 30])

    assert scores == pytest.approx({10: 4.0, 20: 5.0, 30: 3.0})
    assert scorer.score_one(2, 30) == pytest.approx(3.25)


def test_unknown_user_or_item_falls_back_to_baseline(scorer):
    assert scorer.score(99, [10]) == {10: 3.0}
    assert scorer.score(1, [10, 40]) == pytest.approx({10: 4.0, 40: 3.0})


def test_recommend_ranks_and_excludes(scorer):
    top = scorer.recommend(1, [10, 20, 30], n=2)
    assert [item for item, _ in top] == [20, 10]
    assert [score for _, score in top] == pytest.approx([5.0, 4.0])
    assert [item for item, _ in scorer.recommend(1, [10, 20, 30], exclude=[20])] == [10, 30]
    assert scorer.recommend(1, [20], exclude=[20]) == []
