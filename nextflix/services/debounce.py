"""
Anti-rebond des recherches, cote appelant.

Pendant la saisie, chaque nouvelle requete remplace la precedente : la
requete en attente (ou en cours) est annulee et son resultat ecarte. Seule
la derniere requete soumise produit un resultat.
"""

import asyncio
from typing import Optional

from loguru import logger

from nextflix.core.ports.api_clients import SearchResult
from nextflix.services.search_aggregator import SearchAggregator


class SearchDebouncer:
    """
    Enveloppe d'un SearchAggregator avec fenetre d'anti-rebond.

    Attributes:
        DEFAULT_DELAY: Fenetre d'attente en secondes

    Example:
        debouncer = SearchDebouncer(aggregator)
        results = await debouncer.submit("incep")   # None si remplacee entre-temps
    """

    DEFAULT_DELAY: float = 0.5

    def __init__(self, aggregator: SearchAggregator, delay: float = DEFAULT_DELAY) -> None:
        self._aggregator = aggregator
        self._delay = delay
        self._generation = 0
        self._pending: Optional[asyncio.Task] = None

    async def _run(self, query: str) -> list[SearchResult]:
        await asyncio.sleep(self._delay)
        return await self._aggregator.search(query)

    async def submit(self, query: str) -> Optional[list[SearchResult]]:
        """
        Soumet une requete apres la fenetre d'anti-rebond.

        Une requete vide vide les resultats immediatement, sans appel.

        Returns:
            Les resultats si la requete est toujours la plus recente,
            None si une requete plus recente l'a remplacee
        """
        self.cancel()
        generation = self._generation

        if not query.strip():
            return []

        task = asyncio.create_task(self._run(query))
        self._pending = task
        try:
            results = await task
        except asyncio.CancelledError:
            if generation != self._generation:
                logger.debug(f"Recherche {query!r} remplacee avant la fin")
                return None
            raise

        if generation != self._generation:
            return None
        return results

    def cancel(self) -> None:
        """Annule la recherche en attente ; son appelant recoit None."""
        self._generation += 1
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None
