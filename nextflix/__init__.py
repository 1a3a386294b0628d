"""
NextFlix - Journal personnel de films et series vus.

Ce package fournit le moteur de la collection : recherche TMDB agregee,
enrichissement des metadonnees, resolution d'identite, collection persistante
et projections filtrees/triees exportables.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (cas d'utilisation, orchestration)
- adapters/ : Couche infrastructure (CLI, clients API, export)
- infrastructure/ : Persistance cle-valeur (SQLModel)
"""
