"""
Couche domaine (core).

Contient les entités métier et les ports (interfaces abstraites).
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Movie, Category) et valeurs transitoires
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
"""
