import numpy as np
import pandas as pd
import pytest

from svd_recommender.data.dao import (HistoryCursor, ItemDAO, Rating, UserDAO, UserEventDAO,
                                      UserHistory)
from svd_recommender.models.baseline import ConstantScorer


class InMemoryDAO(UserDAO, ItemDAO, UserEventDAO):
    """DAO over explicit ID lists and histories, tracking cursor closes"""

    def __init__(self, user_ids, item_ids, histories):
        self.user_ids = list(user_ids)
        self.item_ids = list(item_ids)
        self.histories = list(histories)
        self.opened = 0
        self.closed = 0

    def get_user_ids(self):
        return list(self.user_ids)

    def get_item_ids(self):
        return list(self.item_ids)

    def stream_events_by_user(self):
        self.opened += 1
        return HistoryCursor(self.histories, on_close=self._on_close)

    def _on_close(self):
        self.closed += 1


def histories_from_ratings(ratings):
    by_user = {}
    for user_id, item_id, value in ratings:
        by_user.setdefault(user_id, []).append(Rating(user_id, item_id, value))
    return [UserHistory(user_id, events) for user_id, events in by_user.items()]


@pytest.fixture
def scenario_dao():
    ratings = [(1, 10, 5.0), (1, 20, 3.0), (2, 10, 4.0)]
    return InMemoryDAO([1, 2], [10, 20], histories_from_ratings(ratings))


@pytest.fixture
def constant_baseline():
    return ConstantScorer(3.0)


@pytest.fixture
def ratings_df():
    rng = np.random.RandomState(7)
    rows = []
    for user_id in range(1, 21):
        for item_id in rng.choice(np.arange(100, 115), size=8, replace=False):
            rows.append((user_id, int(item_id), float(rng.randint(1, 6))))
    return pd.DataFrame(rows, columns=['user_id', 'item_id', 'rating'])
