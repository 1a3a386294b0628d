"""
Attente et relance sur limitation de debit (HTTP 429) pour TMDB.

Seules les reponses 429 sont relancees : c'est le protocole de TMDB pour
lisser la charge, pas un echec. Toute autre erreur (reseau, 4xx, 5xx)
remonte immediatement et la recherche en cours se degrade en resultat vide.

Le delai respecte le header Retry-After quand il est fourni (plafonne a
max_wait), sinon un backoff exponentiel avec jitter.

Usage:
    response = await request_with_retry(client, "GET", "/search/multi", params=...)
"""

from typing import Optional

import httpx
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre (header Retry-After), ou None si absent.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


class wait_retry_after:
    """
    Strategie d'attente tenacity basee sur le header Retry-After.

    Utilise la valeur annoncee par le serveur (plafonnee a max_wait) et se
    rabat sur un backoff exponentiel aleatoire sinon.
    """

    def __init__(self, max_wait: float) -> None:
        self._max_wait = max_wait
        self._fallback = wait_random_exponential(multiplier=0.5, min=0.5, max=max_wait)

    def __call__(self, retry_state: RetryCallState) -> float:
        outcome = retry_state.outcome
        error = outcome.exception() if outcome is not None else None
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return float(min(error.retry_after, self._max_wait))
        return self._fallback(retry_state)


def with_retry(max_attempts: int = 3, max_wait: float = 10):
    """
    Decorateur relancant une coroutine sur RateLimitError.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 3)
        max_wait: Delai maximum entre deux tentatives en secondes (defaut: 10)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_retry_after(max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Convertit le header Retry-After (en secondes) ; ignore le format date HTTP."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 3,
    max_wait: float = 10,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP en relancant sur 429.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP
        url: URL (relative a la base_url du client ou absolue)
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre tentatives
        **kwargs: Arguments passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres statuts non-succes
        httpx.TransportError: Pour les erreurs reseau
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _do_request()
