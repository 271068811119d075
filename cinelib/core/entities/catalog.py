"""
Entités du catalogue de films.

Un Movie représente un fichier vidéo local catalogué. Ses catégories sont
dérivées des liens film-catégorie et ne sont pas stockées sur l'enregistrement.
"""

from dataclasses import dataclass, field
from typing import Optional

from cinelib.utils.constants import UNKNOWN_TITLE


@dataclass
class Movie:
    """
    Film catalogué, associé à un fichier vidéo local.

    Attributs :
        id : Identifiant attribué par le store (None avant insertion)
        title : Titre affiché (non vide)
        file_link : Chemin absolu du fichier vidéo (obligatoire)
        imdb_rating : Note publique 0.0-10.0 (0.0 = inconnue)
        personal_rating : Note personnelle 0-10
        last_view : Dernière lecture, texte "YYYY-MM-DD HH:MM:SS" ou None
        categories : Noms des catégories liées (dérivés des liens)

    Raises:
        ValueError: Si title ou file_link est vide, ou si une note est hors bornes
    """

    title: str
    file_link: str
    imdb_rating: float = 0.0
    personal_rating: int = 0
    last_view: Optional[str] = None
    categories: list[str] = field(default_factory=list)
    id: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("Le titre d'un film ne peut pas etre vide")
        if not self.file_link:
            raise ValueError("Le chemin du fichier d'un film est obligatoire")
        if not 0.0 <= self.imdb_rating <= 10.0:
            raise ValueError(f"Note IMDb hors bornes: {self.imdb_rating}")
        if not 0 <= self.personal_rating <= 10:
            raise ValueError(f"Note personnelle hors bornes: {self.personal_rating}")


@dataclass(frozen=True)
class Category:
    """Catégorie de genre (nom unique en base)."""

    id: int
    name: str


@dataclass(frozen=True)
class LinkRequest:
    """
    Demande de liaison d'un film à une catégorie.

    Le movie_id est fourni par l'appelant une fois le film persisté.
    """

    category_id: int


@dataclass(frozen=True)
class ExtractedMetadata:
    """
    Faits extraits d'une page de film.

    Valeur transitoire : consommée immédiatement pour construire un Movie
    et des LinkRequest, jamais persistée telle quelle.
    """

    title: str = UNKNOWN_TITLE
    rating: float = 0.0
    genres: tuple[str, ...] = ()


@dataclass(frozen=True)
class FilterCriteria:
    """
    Critères de filtrage du catalogue.

    Attributs :
        search_text : Sous-chaîne recherchée dans le titre (insensible à la casse)
        min_rating : Note IMDb minimale (incluse)
        selected_categories : Catégories acceptées (OU logique), vide = pas de filtre
    """

    search_text: str = ""
    min_rating: float = 0.0
    selected_categories: frozenset[str] = frozenset()
