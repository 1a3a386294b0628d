"""
Couche infrastructure.

Persistance du stockage cle-valeur de la collection (SQLite via SQLModel).
"""
