from filmorate.domain.entities.film import Film
from filmorate.domain.policies.popularity import top_films


def _film(fid: int, likes: int) -> Film:
    return Film(id=fid, name=f"f{fid}", likes=set(range(100, 100 + likes)))


def test_orders_by_like_count_and_truncates():
    films = [_film(1, 3), _film(2, 1), _film(3, 2)]
    assert [f.id for f in top_films(films, 2)] == [1, 3]


def test_ties_keep_input_order():
    films = [_film(1, 1), _film(2, 2), _film(3, 1), _film(4, 2)]
    assert [f.id for f in top_films(films, 10)] == [2, 4, 1, 3]


def test_count_larger_than_collection_returns_all():
    films = [_film(1, 0), _film(2, 5)]
    assert [f.id for f in top_films(films, 10)] == [2, 1]


def test_non_positive_count_returns_empty():
    films = [_film(1, 1)]
    assert top_films(films, 0) == []
    assert top_films(films, -3) == []


def test_accepts_any_iterable():
    assert [f.id for f in top_films(iter([_film(1, 0), _film(2, 1)]), 1)] == [2]
