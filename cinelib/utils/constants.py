"""
Constantes globales pour CineLib.

Ce module contient :
- Les categories creees au premier demarrage
- Les extensions de fichiers video acceptees
- Les valeurs par defaut de l'extraction de metadonnees
- Les regles de suggestion de suppression
"""

# Categories inserees si la table categories est vide
DEFAULT_CATEGORIES = (
    "Action",
    "Adventure",
    "Animation",
    "Comedy",
    "Crime",
    "Documentary",
    "Drama",
    "Family",
    "Fantasy",
    "History",
    "Horror",
    "Music",
    "Mystery",
    "Romance",
    "Science Fiction",
    "TV Movie",
    "Thriller",
    "War",
    "Western",
)

# Extensions proposees lors de la selection d'un fichier film
MOVIE_EXTENSIONS = frozenset({
    ".mp4",
    ".mpeg4",
    ".mkv",
    ".avi",
    ".mov",
})

# Navigateur simule pour la recuperation des pages
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

UNKNOWN_TITLE = "Unknown"

# Format textuel de last_view
LAST_VIEW_FORMAT = "%Y-%m-%d %H:%M:%S"

# Suggestions de suppression : note personnelle < 6 et non vu depuis 2 ans
STALE_RATING_THRESHOLD = 6
STALE_AFTER_YEARS = 2
