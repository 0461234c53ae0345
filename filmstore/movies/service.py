from typing import List, Sequence

from .schemas import Movie


def filter_movies(movies: Sequence[Movie], query: str) -> List[Movie]:
    """Movies whose name or category contains ``query``, ignoring case."""
    if not query:
        return list(movies)

    needle = query.casefold()
    return [
        movie for movie in movies
        if needle in movie.name.casefold() or needle in movie.category.casefold()
    ]
