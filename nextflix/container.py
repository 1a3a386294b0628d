"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
Le stockage cle-valeur, le fournisseur de recherche et les heuristiques sont
injectes dans les services : aucun service ne cree lui-meme ses adaptateurs.
"""

from dependency_injector import containers, providers

from nextflix.adapters.api.cache import APICache
from nextflix.adapters.api.factory import build_search_provider
from nextflix.adapters.export.file_sink import DirectoryExportSink
from nextflix.config import Settings
from nextflix.infrastructure.persistence.database import create_db_engine, init_db
from nextflix.infrastructure.persistence.key_value_store import SQLModelKeyValueStore
from nextflix.services.backfill import HeuristicFieldBackfiller
from nextflix.services.collection_store import CollectionStore
from nextflix.services.debounce import SearchDebouncer
from nextflix.services.content_classifier import KeywordContentClassifier
from nextflix.services.engine import NextFlixEngine
from nextflix.services.exporter import CollectionExporter
from nextflix.services.genre_resolver import GenreResolver
from nextflix.services.identity_resolver import IdentityResolver
from nextflix.services.metadata_enricher import MetadataEnricher
from nextflix.services.preferences import PreferencesService
from nextflix.services.search_aggregator import SearchAggregator
from nextflix.services.view_composer import ViewComposer


def _entries_reader(store: CollectionStore):
    """Lecture differee de la collection (etat courant a chaque appel)."""
    return lambda: store.entries


def _content_filter_reader(preferences: PreferencesService):
    """Lecture differee du filtre de contenu (une modification prend effet immediatement)."""
    return lambda: preferences.content_filter_enabled


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        engine = container.engine()
        engine.start()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Persistance - engine cree puis tables initialisees une seule fois
    db_engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )
    database = providers.Resource(init_db, engine=db_engine)
    kv_store = providers.Singleton(SQLModelKeyValueStore, engine=database)

    # Fournisseur de recherche - TMDB si cle configuree, hors-ligne sinon
    api_cache = providers.Singleton(
        APICache,
        cache_dir=config.provided.cache_dir,
    )
    search_provider = providers.Singleton(
        build_search_provider,
        settings=config,
        cache=api_cache,
    )

    # Heuristiques (stateless - Singletons)
    genre_resolver = providers.Singleton(GenreResolver)
    content_classifier = providers.Singleton(KeywordContentClassifier)
    field_backfiller = providers.Singleton(HeuristicFieldBackfiller)

    preferences = providers.Singleton(PreferencesService, kv_store=kv_store)

    # Recherche
    metadata_enricher = providers.Singleton(
        MetadataEnricher,
        provider=search_provider,
        timeout=config.provided.provider_timeout,
    )
    search_aggregator = providers.Singleton(
        SearchAggregator,
        provider=search_provider,
        enricher=metadata_enricher,
        genre_resolver=genre_resolver,
        classifier=content_classifier,
        content_filter_enabled=providers.Callable(_content_filter_reader, preferences),
        pages=config.provided.search_pages,
        enrich_limit=config.provided.enrich_limit,
        timeout=config.provided.provider_timeout,
    )

    # Collection - un seul chemin de mutation pour toute l'application
    collection_store = providers.Singleton(
        CollectionStore,
        kv_store=kv_store,
        backfiller=field_backfiller,
        genre_resolver=genre_resolver,
    )
    collection_entries = providers.Callable(_entries_reader, collection_store)

    identity_resolver = providers.Singleton(
        IdentityResolver,
        entries=collection_entries,
    )
    view_composer = providers.Singleton(
        ViewComposer,
        classifier=content_classifier,
    )
    exporter = providers.Singleton(
        CollectionExporter,
        entries=collection_entries,
    )

    # Export - Factory car le repertoire peut etre surcharge par commande
    # Utiliser: container.export_sink(directory=Path(...))
    export_sink = providers.Factory(
        DirectoryExportSink,
        directory=config.provided.export_dir,
    )

    engine = providers.Singleton(
        NextFlixEngine,
        store=collection_store,
        aggregator=search_aggregator,
        identity_resolver=identity_resolver,
        view_composer=view_composer,
        exporter=exporter,
        preferences=preferences,
    )

    # Recherche interactive - un debouncer par boucle de saisie
    search_debouncer = providers.Factory(
        SearchDebouncer,
        aggregator=search_aggregator,
        delay=config.provided.debounce_seconds,
    )
