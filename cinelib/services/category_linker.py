"""
Resolution des genres extraits vers les categories connues.

Comparaison exacte insensible a la casse ; en cas de doublons de casse
dans le catalogue, la premiere categorie enumeree l'emporte. Un genre
sans categorie correspondante est ignore sans erreur.
"""

from collections.abc import Iterable

from loguru import logger

from cinelib.core.entities.catalog import Category, LinkRequest


def build_category_index(known_categories: Iterable[Category]) -> dict[str, Category]:
    """Index nom normalise -> categorie, en gardant la premiere occurrence."""
    index: dict[str, Category] = {}
    for category in known_categories:
        index.setdefault(category.name.casefold(), category)
    return index


def resolve_genres(
    genre_names: Iterable[str],
    known_categories: Iterable[Category],
) -> list[LinkRequest]:
    """
    Produit une demande de liaison par genre reconnu, dans l'ordre des genres.

    Args:
        genre_names: Genres extraits de la page
        known_categories: Categories existantes, dans l'ordre du store

    Returns:
        Liste de LinkRequest (les genres inconnus n'en produisent aucune)
    """
    index = build_category_index(known_categories)
    requests: list[LinkRequest] = []
    for genre in genre_names:
        category = index.get(genre.casefold())
        if category is None:
            logger.debug("Genre sans categorie ignore", genre=genre)
            continue
        requests.append(LinkRequest(category_id=category.id))
    return requests
