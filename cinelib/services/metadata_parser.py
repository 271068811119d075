"""
Extraction des metadonnees d'un film depuis une page HTML.

La page doit contenir un bloc <script type="application/ld+json">. Le format
de la page n'etant pas stable, le bloc n'est jamais parse comme du JSON :
trois recherches independantes par motif en extraient le titre, la note
agregee et les genres. Un champ introuvable garde sa valeur par defaut.
"""

import html
import re
from typing import Optional

from loguru import logger

from cinelib.core.entities.catalog import ExtractedMetadata
from cinelib.utils.constants import UNKNOWN_TITLE

# Premier bloc JSON-LD de la page
JSON_LD_PATTERN = re.compile(
    r"<script[^>]*\btype\s*=\s*[\"']application/ld\+json[\"'][^>]*>(.*?)</script>",
    re.DOTALL | re.IGNORECASE,
)

TITLE_PATTERN = re.compile(r"\"name\"\s*:\s*\"([^\"]+)\"")
AGGREGATE_RATING_PATTERN = re.compile(r"\"aggregateRating\"\s*:\s*\{([^}]+)\}", re.DOTALL)
RATING_VALUE_PATTERN = re.compile(r"\"ratingValue\"\s*:\s*\"?([\d.]+)\"?")
GENRE_ARRAY_PATTERN = re.compile(r"\"genre\"\s*:\s*\[(.*?)\]", re.DOTALL)
QUOTED_STRING_PATTERN = re.compile(r"\"([^\"]+)\"")


def find_json_ld_block(page: str) -> Optional[str]:
    """Retourne le contenu du premier bloc JSON-LD, ou None."""
    match = JSON_LD_PATTERN.search(page)
    if match is None:
        return None
    return match.group(1)


def extract_title(block: str) -> Optional[str]:
    """Titre du premier champ "name" du bloc (espaces retires)."""
    match = TITLE_PATTERN.search(block)
    if match is None:
        return None
    title = html.unescape(match.group(1)).strip()
    return title or None


def extract_rating(block: str) -> Optional[float]:
    """
    Note de l'objet aggregateRating.

    Une valeur non numerique (ex: "8.8.1") donne 0.0 au lieu d'une erreur.
    """
    aggregate = AGGREGATE_RATING_PATTERN.search(block)
    if aggregate is None:
        return None
    value = RATING_VALUE_PATTERN.search(aggregate.group(1))
    if value is None:
        return None
    try:
        return float(value.group(1))
    except ValueError:
        logger.debug("Note illisible ignoree", raw=value.group(1))
        return 0.0


def extract_genres(block: str) -> Optional[tuple[str, ...]]:
    """Chaines entre guillemets du tableau "genre", dans l'ordre."""
    match = GENRE_ARRAY_PATTERN.search(block)
    if match is None:
        return None
    return tuple(
        html.unescape(genre) for genre in QUOTED_STRING_PATTERN.findall(match.group(1))
    )


def extract(page: str) -> ExtractedMetadata:
    """
    Extrait titre, note et genres d'une page de film.

    Ne leve jamais d'exception : sans bloc JSON-LD, ou pour chaque champ
    introuvable, les valeurs par defaut sont conservees
    (title="Unknown", rating=0.0, genres=()).

    Args:
        page: Texte HTML de la page

    Returns:
        ExtractedMetadata avec les champs trouves
    """
    block = find_json_ld_block(page or "")
    if block is None:
        logger.debug("Aucun bloc JSON-LD trouve dans la page")
        return ExtractedMetadata()

    title = extract_title(block)
    rating = extract_rating(block)
    genres = extract_genres(block)

    metadata = ExtractedMetadata(
        title=title if title is not None else UNKNOWN_TITLE,
        rating=rating if rating is not None else 0.0,
        genres=genres if genres is not None else (),
    )
    logger.debug(
        "Metadonnees extraites",
        title=metadata.title,
        rating=metadata.rating,
        genres=list(metadata.genres),
    )
    return metadata
