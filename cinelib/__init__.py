"""
CineLib - Catalogue personnel de films stockes localement.

Ce package permet de cataloguer des fichiers video locaux, de filtrer
le catalogue, de suggerer les films a supprimer et d'importer les
metadonnees d'un film depuis le bloc JSON-LD d'une page web.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports)
- services/ : Couche application (parser, filtre, detection, liaison, import)
- adapters/ : Couche infrastructure (CLI, client HTTP, lecteur video)
- infrastructure/ : Persistance SQLModel
"""

__version__ = "0.1.0"
