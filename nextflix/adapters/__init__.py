"""
Couche adaptateurs (infrastructure).

Implementations concretes des ports : fournisseur de recherche (TMDB,
hors-ligne), destination des exports et interface en ligne de commande.
"""
