"""
Filtrage du catalogue en memoire.

Projection pure : recalculee a chaque changement de critere, sans effet de bord.
"""

from collections.abc import Iterable

from cinelib.core.entities.catalog import FilterCriteria, Movie


def matches_search(movie: Movie, search_text: str) -> bool:
    """Recherche de sous-chaine insensible a la casse dans le titre."""
    if not search_text:
        return True
    return search_text.casefold() in movie.title.casefold()


def matches_rating(movie: Movie, min_rating: float) -> bool:
    return movie.imdb_rating >= min_rating


def matches_categories(movie: Movie, selected_categories: Iterable[str]) -> bool:
    """Au moins une categorie selectionnee (OU). Aucune selection = tout passe."""
    selected = set(selected_categories)
    if not selected:
        return True
    return any(name in selected for name in movie.categories)


def filter_movies(movies: Iterable[Movie], criteria: FilterCriteria) -> list[Movie]:
    """
    Retourne les films satisfaisant les trois criteres, dans l'ordre d'entree.

    Args:
        movies: Films charges en memoire
        criteria: Texte recherche, note minimale, categories selectionnees

    Returns:
        Sous-ensemble ordonne des films
    """
    return [
        movie
        for movie in movies
        if matches_search(movie, criteria.search_text)
        and matches_rating(movie, criteria.min_rating)
        and matches_categories(movie, criteria.selected_categories)
    ]
