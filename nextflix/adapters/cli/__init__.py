"""Adaptateur CLI : commandes Typer et rendu Rich de la collection."""
