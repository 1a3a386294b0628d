"""
Fournisseur de recherche hors-ligne.

Remplace TMDB quand aucune cle API valide n'est configuree. Le catalogue est
fixe et deterministe, stocke au format brut de TMDB pour passer par la meme
normalisation que le client reel : le moteur se comporte a l'identique en
forme, ce qui permet de l'utiliser sans reseau (demo, tests).
"""

from typing import Any

from nextflix.adapters.api.tmdb_payloads import parse_search_item
from nextflix.core.entities.collection import MediaKind
from nextflix.core.ports.api_clients import ISearchProvider, SearchResult


OFFLINE_PAGE_SIZE = 20

# Catalogue au format /search/multi
OFFLINE_CATALOGUE: tuple[dict[str, Any], ...] = (
    {
        "id": 27205,
        "media_type": "movie",
        "title": "Inception",
        "poster_path": "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
        "backdrop_path": "/8ZTVqvKDQ8emSGUEMjsS4yHAwrp.jpg",
        "overview": "Cobb, a skilled thief who commits corporate espionage by infiltrating "
        "the subconscious of his targets, is offered a chance to regain his old life.",
        "release_date": "2010-07-15",
        "vote_average": 8.4,
        "genre_ids": [28, 878, 12],
    },
    {
        "id": 157336,
        "media_type": "movie",
        "title": "Interstellar",
        "poster_path": "/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg",
        "backdrop_path": "/pbrkL804c8yAv3zBZR4QPEafpAR.jpg",
        "overview": "The adventures of a group of explorers who make use of a newly "
        "discovered wormhole to surpass the limitations on human space travel.",
        "release_date": "2014-11-05",
        "vote_average": 8.4,
        "genre_ids": [12, 18, 878],
    },
    {
        "id": 155,
        "media_type": "movie",
        "title": "The Dark Knight",
        "poster_path": "/qJ2tW6WMUDux911r6m7haRef0WH.jpg",
        "backdrop_path": "/dqK9Hag1054tghRQSqLSfrkvQnA.jpg",
        "overview": "Batman raises the stakes in his war on crime with the help of "
        "Lt. Jim Gordon and District Attorney Harvey Dent.",
        "release_date": "2008-07-16",
        "vote_average": 8.5,
        "genre_ids": [18, 28, 80, 53],
    },
    {
        "id": 603,
        "media_type": "movie",
        "title": "The Matrix",
        "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
        "backdrop_path": "/icmmSD4vTTDKOq2vvdulafOGw93.jpg",
        "overview": "Set in the 22nd century, The Matrix tells the story of a computer "
        "hacker who joins a group of underground insurgents fighting the machines.",
        "release_date": "1999-03-30",
        "vote_average": 8.2,
        "genre_ids": [28, 878],
    },
    {
        "id": 680,
        "media_type": "movie",
        "title": "Pulp Fiction",
        "poster_path": "/d5iIlFn5s0ImszYzBPb8JPIfbXD.jpg",
        "backdrop_path": "/suaEOtk1N1sgg2MTM7oZd2cfVp3.jpg",
        "overview": "A burger-loving hit man, his philosophical partner, a drug-addled "
        "gangster's moll and a washed-up boxer converge in this sprawling crime caper.",
        "release_date": "1994-09-10",
        "vote_average": 8.5,
        "genre_ids": [53, 80],
    },
    {
        "id": 313369,
        "media_type": "movie",
        "title": "La La Land",
        "poster_path": "/uDO8zWDhfWwoFdKS4fzkUJt0Rf0.jpg",
        "backdrop_path": "/nadTlnTE6DdgmYsN4iWc2a2wiaI.jpg",
        "overview": "Mia, an aspiring actress, and Sebastian, a dedicated jazz musician, "
        "struggle to make ends meet in a city known for crushing hopes and breaking hearts.",
        "release_date": "2016-11-29",
        "vote_average": 7.9,
        "genre_ids": [35, 18, 10749, 10402],
    },
    {
        "id": 496243,
        "media_type": "movie",
        "title": "Parasite",
        "poster_path": "/7IiTTgloJzvGI1TAYymCfbfl3vT.jpg",
        "backdrop_path": "/TU9NIjwzjoKPwQHoHshkFcQUCG.jpg",
        "overview": "All unemployed, Ki-taek's family takes peculiar interest in the "
        "wealthy and glamorous Parks for their livelihood.",
        "release_date": "2019-05-30",
        "vote_average": 8.5,
        "genre_ids": [35, 53, 18],
    },
    {
        "id": 438631,
        "media_type": "movie",
        "title": "Dune",
        "poster_path": "/d5NXSklXo0qyIYkgV94XAgMIckC.jpg",
        "backdrop_path": "/jYEW5xZkZk2WTrdbMGAPFuBqbDc.jpg",
        "overview": "Paul Atreides, a brilliant and gifted young man born into a great "
        "destiny, must travel to the most dangerous planet in the universe.",
        "release_date": "2021-09-15",
        "vote_average": 7.8,
        "genre_ids": [878, 12],
    },
    {
        "id": 693134,
        "media_type": "movie",
        "title": "Dune: Part Two",
        "poster_path": "/1pdfLvkbY9ohJlCjQH2CZjjYVvJ.jpg",
        "backdrop_path": "/xOMo8BRK7PfcJv9JCnx7s5hj0PX.jpg",
        "overview": "Follow the mythic journey of Paul Atreides as he unites with Chani "
        "and the Fremen while on a path of revenge.",
        "release_date": "2024-02-27",
        "vote_average": 8.2,
        "genre_ids": [878, 12],
    },
    {
        "id": 66732,
        "media_type": "tv",
        "name": "Stranger Things",
        "poster_path": "/49WJfeN0moxb9IPfGn8AIqMGskD.jpg",
        "backdrop_path": "/56v2KjBlU4XaOv9rVYEQypROD7P.jpg",
        "overview": "When a young boy vanishes, a small town uncovers a mystery involving "
        "secret experiments, terrifying supernatural forces and one strange little girl.",
        "first_air_date": "2016-07-15",
        "vote_average": 8.6,
        "genre_ids": [10765, 9648, 10759],
    },
    {
        "id": 1396,
        "media_type": "tv",
        "name": "Breaking Bad",
        "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
        "backdrop_path": "/tsRy63Mu5cu8etL1X7ZLyf7UP1M.jpg",
        "overview": "Walter White, a New Mexico chemistry teacher, is diagnosed with "
        "Stage III cancer and turns to a life of crime.",
        "first_air_date": "2008-01-20",
        "vote_average": 8.9,
        "genre_ids": [18, 80],
    },
    {
        "id": 2316,
        "media_type": "tv",
        "name": "The Office",
        "poster_path": "/7DJKHzAi83BmQrWLrYYOqcoKfhR.jpg",
        "backdrop_path": "/mLyW3UTgi2lsMdtueYODcfAB9Ku.jpg",
        "overview": "The everyday lives of office employees in the Scranton, Pennsylvania "
        "branch of the fictional Dunder Mifflin Paper Company.",
        "first_air_date": "2005-03-24",
        "vote_average": 8.6,
        "genre_ids": [35],
    },
    {
        "id": 1399,
        "media_type": "tv",
        "name": "Game of Thrones",
        "poster_path": "/1XS1oqL89opfnbLl8WnZY1O1uJx.jpg",
        "backdrop_path": "/2OMB0ynKlyIenMJWI2Dy9IWT4c.jpg",
        "overview": "Seven noble families fight for control of the mythical land of "
        "Westeros.",
        "first_air_date": "2011-04-17",
        "vote_average": 8.4,
        "genre_ids": [10765, 18, 10759],
    },
    {
        "id": 100088,
        "media_type": "tv",
        "name": "The Last of Us",
        "poster_path": "/uKvVjHNqB5VmOrdxqAt2F7J78ED.jpg",
        "backdrop_path": "/uDgy6hyPd82kOHh6I95FLtLnj6p.jpg",
        "overview": "Twenty years after modern civilization has been destroyed, Joel is "
        "hired to smuggle Ellie out of an oppressive quarantine zone.",
        "first_air_date": "2023-01-15",
        "vote_average": 8.6,
        "genre_ids": [18],
    },
    {
        "id": 525,
        "media_type": "person",
        "name": "Christopher Nolan",
        "known_for_department": "Directing",
    },
    {
        "id": 999001,
        "media_type": "movie",
        "title": "The Matrix Fan Edit",
        "poster_path": None,
        "backdrop_path": None,
        "overview": "An unreleased fan edit without artwork.",
        "release_date": "2020-01-01",
        "vote_average": 0,
        "genre_ids": [878],
    },
)

# Credits au format /{movie|tv}/{id}/credits
OFFLINE_CREDITS: dict[int, dict[str, list[dict[str, str]]]] = {
    27205: {
        "cast": [{"name": n} for n in (
            "Leonardo DiCaprio", "Joseph Gordon-Levitt", "Elliot Page", "Tom Hardy",
            "Ken Watanabe", "Cillian Murphy", "Tom Berenger", "Marion Cotillard",
            "Michael Caine", "Dileep Rao", "Lukas Haas",
        )],
        "crew": [
            {"name": "Emma Thomas", "job": "Producer"},
            {"name": "Christopher Nolan", "job": "Director"},
        ],
    },
    157336: {
        "cast": [{"name": n} for n in (
            "Matthew McConaughey", "Anne Hathaway", "Jessica Chastain", "Michael Caine",
        )],
        "crew": [{"name": "Christopher Nolan", "job": "Director"}],
    },
    155: {
        "cast": [{"name": n} for n in (
            "Christian Bale", "Heath Ledger", "Aaron Eckhart", "Gary Oldman",
        )],
        "crew": [{"name": "Christopher Nolan", "job": "Director"}],
    },
    603: {
        "cast": [{"name": n} for n in (
            "Keanu Reeves", "Laurence Fishburne", "Carrie-Anne Moss", "Hugo Weaving",
        )],
        "crew": [
            {"name": "Lana Wachowski", "job": "Director"},
            {"name": "Lilly Wachowski", "job": "Director"},
        ],
    },
    680: {
        "cast": [{"name": n} for n in (
            "John Travolta", "Samuel L. Jackson", "Uma Thurman", "Bruce Willis",
        )],
        "crew": [{"name": "Quentin Tarantino", "job": "Director"}],
    },
    313369: {
        "cast": [{"name": n} for n in ("Ryan Gosling", "Emma Stone", "John Legend")],
        "crew": [{"name": "Damien Chazelle", "job": "Director"}],
    },
    496243: {
        "cast": [{"name": n} for n in ("Song Kang-ho", "Lee Sun-kyun", "Cho Yeo-jeong")],
        "crew": [{"name": "Bong Joon-ho", "job": "Director"}],
    },
    438631: {
        "cast": [{"name": n} for n in ("Timothée Chalamet", "Rebecca Ferguson", "Zendaya")],
        "crew": [{"name": "Denis Villeneuve", "job": "Director"}],
    },
    693134: {
        "cast": [{"name": n} for n in ("Timothée Chalamet", "Zendaya", "Austin Butler")],
        "crew": [{"name": "Denis Villeneuve", "job": "Director"}],
    },
    66732: {
        "cast": [{"name": n} for n in (
            "Winona Ryder", "David Harbour", "Millie Bobby Brown", "Finn Wolfhard",
        )],
        "crew": [
            {"name": "Matt Duffer", "job": "Creator"},
            {"name": "Ross Duffer", "job": "Creator"},
            {"name": "Shawn Levy", "job": "Executive Producer"},
        ],
    },
    1396: {
        "cast": [{"name": n} for n in ("Bryan Cranston", "Aaron Paul", "Anna Gunn")],
        "crew": [{"name": "Vince Gilligan", "job": "Executive Producer"}],
    },
    2316: {
        "cast": [{"name": n} for n in ("Steve Carell", "Rainn Wilson", "John Krasinski")],
        "crew": [{"name": "Greg Daniels", "job": "Executive Producer"}],
    },
    1399: {
        "cast": [{"name": n} for n in ("Emilia Clarke", "Kit Harington", "Peter Dinklage")],
        "crew": [
            {"name": "David Benioff", "job": "Executive Producer"},
            {"name": "D. B. Weiss", "job": "Executive Producer"},
        ],
    },
    100088: {
        "cast": [{"name": n} for n in ("Pedro Pascal", "Bella Ramsey", "Gabriel Luna")],
        "crew": [
            {"name": "Craig Mazin", "job": "Executive Producer"},
            {"name": "Neil Druckmann", "job": "Executive Producer"},
        ],
    },
}


def _matches(item: dict[str, Any], tokens: list[str]) -> bool:
    """Vrai si chaque mot de la requete apparait dans le titre."""
    title = (item.get("title") or item.get("name") or "").lower()
    return all(token in title for token in tokens)


class OfflineSearchProvider(ISearchProvider):
    """
    Fournisseur de recherche sur catalogue fixe.

    Meme contrat que TMDBClient : pages de OFFLINE_PAGE_SIZE resultats dans
    l'ordre du catalogue, credits au format TMDB (vides pour un ID inconnu).
    """

    def __init__(
        self,
        catalogue: tuple[dict[str, Any], ...] = OFFLINE_CATALOGUE,
        credits: dict[int, dict[str, list[dict[str, str]]]] | None = None,
        page_size: int = OFFLINE_PAGE_SIZE,
    ) -> None:
        self._catalogue = catalogue
        self._credits = OFFLINE_CREDITS if credits is None else credits
        self._page_size = page_size

    @property
    def source(self) -> str:
        return "offline"

    async def search_multi(self, query: str, page: int = 1) -> list[SearchResult]:
        tokens = query.lower().split()
        if not tokens:
            return []

        matching = [item for item in self._catalogue if _matches(item, tokens)]
        start = (page - 1) * self._page_size
        results = []
        for item in matching[start:start + self._page_size]:
            parsed = parse_search_item(item)
            if parsed is not None:
                results.append(parsed)
        return results

    async def get_credits(self, provider_id: int, media_kind: MediaKind) -> dict[str, Any]:
        data = self._credits.get(provider_id, {})
        return {
            "cast": list(data.get("cast", [])),
            "crew": list(data.get("crew", [])),
        }
