"""
Couche application (services).

- genre_resolver, content_classifier, backfill : heuristiques pures
- metadata_enricher : credits d'un titre via le fournisseur
- search_aggregator : recherche multi-pages filtree et enrichie
- debounce : anti-rebond de la saisie, cote appelant
- identity_resolver : correspondance candidat / collection
- collection_store : collection persistee
- view_composer, exporter : projections et exports
- preferences : filtre de contenu persiste
"""
