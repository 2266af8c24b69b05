import numpy as np
import pandas as pd
import pytest

from svd_recommender.data.dao import (HistoryCursor, Purchase, Rating, RatingFrameDAO,
                                      UserHistory, user_rating_vector)
from svd_recommender.errors import InvalidInputError


def test_later_rating_wins():
    ratings = [Rating(1, 10, 2.0), Rating(1, 20, 4.0), Rating(1, 10, 5.0)]

    assert user_rating_vector(ratings) == {10: 5.0, 20: 4.0}


def test_older_timestamp_does_not_override():
    ratings = [Rating(1, 10, 2.0, timestamp=200), Rating(1, 10, 5.0, timestamp=100)]

    assert user_rating_vector(ratings) == {10: 2.0}


def test_unrate_removes_item():
    ratings = [Rating(1, 10, 2.0), Rating(1, 10, None), Rating(1, 20, 1.0)]

    assert user_rating_vector(ratings) == {20: 1.0}


def test_history_filter_keeps_only_ratings():
    history = UserHistory(1, [Rating(1, 10, 3.0), Purchase(1, 20), Rating(1, 30, 1.0)])

    assert [e.item_id for e in history.filter(Rating)] == [10, 30]


def test_cursor_closes_once_and_rejects_iteration():
    closes = []
    cursor = HistoryCursor([UserHistory(1), UserHistory(2)], on_close=lambda: closes.append(1))

    with cursor:
        assert next(cursor).user_id == 1
    cursor.close()

    assert cursor.closed
    assert closes == [1]
    with pytest.raises(RuntimeError):
        next(cursor)


def test_frame_dao_ids_and_histories():
    df = pd.DataFrame({
        'user_id': [5, 3, 5, 3],
        'item_id': [100, 200, 200, 100],
        'rating': [4.0, 2.0, 3.5, 1.0],
    })
    dao = RatingFrameDAO(df)

    assert dao.get_user_ids() == [3, 5]
    assert dao.get_item_ids() == [100, 200]

    with dao.stream_events_by_user() as cursor:
        histories = list(cursor)

    assert [h.user_id for h in histories] == [3, 5]
    assert user_rating_vector(histories[1].filter(Rating)) == {100: 4.0, 200: 3.5}


def test_frame_dao_orders_events_by_timestamp():
    dao = RatingFrameDAO.from_records([(1, 10, 5.0, 20), (1, 10, 1.0, 10)])

    with dao.stream_events_by_user() as cursor:
        history = next(cursor)

    assert [e.value for e in history] == [1.0, 5.0]
    assert user_rating_vector(history.filter(Rating)) == {10: 5.0}


def test_frame_dao_missing_column():
    with pytest.raises(InvalidInputError, match="rating"):
        RatingFrameDAO(pd.DataFrame({'user_id': [1], 'item_id': [2]}))


def test_untimestamped_rating_keeps_newest_timestamp():
    ratings = [
        Rating(1, 10, 2.0, timestamp=200),
        Rating(1, 10, 3.0),
        Rating(1, 10, 5.0, timestamp=100),
    ]

    assert user_rating_vector(ratings) == {10: 3.0}


def test_newer_timestamp_after_untimestamped_rating_applies():
    ratings = [Rating(1, 10, 2.0, timestamp=100), Rating(1, 10, 3.0), Rating(1, 10, 4.0, timestamp=150)]

    assert user_rating_vector(ratings) == {10: 4.0}


def test_event_keeps_non_integral_ids():
    assert Rating(1, 10.5, 4.0).item_id == 10.5
    assert Rating(np.int64(1), 10.0, 4.0).item_id == 10
    assert type(Rating(np.int64(1), 10, 4.0).user_id) is int
