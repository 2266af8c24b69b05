import pandas as pd
import pytest

from svd_recommender.errors import InvalidInputError
from svd_recommender.models.baseline import (ConstantScorer, GlobalMeanScorer, ItemMeanScorer,
                                             UserMeanScorer, create_baseline)


@pytest.fixture
def small_ratings():
    return pd.DataFrame({
        'user_id': [1, 1, 2, 2, 3],
        'item_id': [10, 20, 10, 30, 10],
        'rating': [5.0, 3.0, 4.0, 2.0, 1.0],
    })


def test_global_mean(small_ratings):
    scorer = GlobalMeanScorer().fit(small_ratings)

    assert scorer.score(1, [10, 99]) == {10: 3.0, 99: 3.0}


def test_item_mean_without_damping(small_ratings):
    scorer = ItemMeanScorer().fit(small_ratings)

    scores = scorer.score(1, [10, 20, 30, 99])
    assert scores[10] == pytest.approx(10.0 / 3)
    assert scores[20] == pytest.approx(3.0)
    assert scores[30] == pytest.approx(2.0)
    assert scores[99] == pytest.approx(3.0)


def test_item_mean_damping_shrinks_to_global_mean(small_ratings):
    scorer = ItemMeanScorer(damping=1.0).fit(small_ratings)

    # item 30: offset (2 - 3) / (1 + 1)
    assert scorer.score_one(1, 30) == pytest.approx(2.5)


def test_user_mean_offsets(small_ratings):
    scorer = UserMeanScorer(GlobalMeanScorer()).fit(small_ratings)

    assert scorer.score_one(1, 99) == pytest.approx(4.0)
    assert scorer.score_one(3, 10) == pytest.approx(1.0)
    assert scorer.score_one(42, 10) == pytest.approx(3.0)


def test_scores_cover_requested_items(small_ratings):
    scorer = create_baseline({'type': 'user_item_mean', 'damping': 5.0}).fit(small_ratings)

    scores = scorer.score(2, {10, 30, 77})
    assert set(scores) == {10, 30, 77}


def test_unfitted_scorer_raises():
    with pytest.raises(RuntimeError):
        ItemMeanScorer().score(1, [1])


def test_empty_frame_rejected():
    with pytest.raises(InvalidInputError):
        GlobalMeanScorer().fit(pd.DataFrame({'user_id': [], 'item_id': [], 'rating': []}))


def test_create_baseline_types():
    assert isinstance(create_baseline({'type': 'constant', 'value': 2.5}), ConstantScorer)
    assert isinstance(create_baseline({'type': 'global_mean'}), GlobalMeanScorer)
    assert create_baseline({'type': 'item_mean', 'damping': 3}).damping == 3.0
    assert isinstance(create_baseline(), UserMeanScorer)
    with pytest.raises(InvalidInputError, match="median"):
        create_baseline({'type': 'median'})
