import pandas as pd
import pytest

from svd_recommender.data.dao import RatingFrameDAO
from svd_recommender.data.data_processor import RatingDataProcessor
from svd_recommender.errors import InvalidInputError


def test_load_csv_drops_incomplete_rows(tmp_path):
    path = tmp_path / 'ratings.csv'
    path.write_text("user_id,item_id,rating\n1,10,4.0\n2,,3.0\n3,30,\n4,40,2.5\n")

    df = RatingDataProcessor().load_data(path)

    assert list(df['user_id']) == [1, 4]
    assert df['item_id'].dtype == 'int64'


def test_custom_columns():
    processor = RatingDataProcessor({'user_col': 'u', 'item_col': 'i', 'rating_col': 'r'})
    processor.load_frame(pd.DataFrame({'u': [1], 'i': [2], 'r': [3]}))

    dao = processor.to_dao()

    assert isinstance(dao, RatingFrameDAO)
    assert dao.get_user_ids() == [1]


def test_missing_columns():
    with pytest.raises(InvalidInputError, match="rating"):
        RatingDataProcessor().load_frame(pd.DataFrame({'user_id': [1], 'item_id': [2]}))


def test_split(ratings_df):
    processor = RatingDataProcessor()
    processor.load_frame(ratings_df)

    train, test = processor.split(test_size=0.25, random_state=0)

    assert len(train) + len(test) == len(ratings_df)
    assert len(test) == 40


def test_split_without_test_set(ratings_df):
    processor = RatingDataProcessor()
    processor.load_frame(ratings_df)

    train, test = processor.split(test_size=0)

    assert len(train) == len(ratings_df)
    assert len(test) == 0


def test_split_requires_data():
    with pytest.raises(RuntimeError):
        RatingDataProcessor().split()
