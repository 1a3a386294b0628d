"""
Constantes globales pour NextFlix.

Ce module contient toutes les constantes utilisees dans l'application:
- Cles du stockage cle-valeur
- Mapping des IDs de genre TMDB vers noms affiches (films et series)
- Liste de mots-cles du filtre de contenu
- Tables heuristiques de la migration des champs manquants
- URLs des images TMDB
"""

# Cles du stockage cle-valeur (compatibles avec l'application web d'origine)
STORAGE_KEY_COLLECTION = "nextflix-data"
STORAGE_KEY_CONTENT_FILTER = "nextflix-content-filter"
STORAGE_KEY_LAST_ADDED = "nextflix-last-added"
STORAGE_KEY_CORRUPT_SUFFIX = ".corrupt"

# Images TMDB (resolues uniquement au moment de l'affichage)
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
TMDB_IMAGE_BASE_URL_HIRES = "https://image.tmdb.org/t/p/w1280"

# Limites d'enrichissement
MAX_CAST_MEMBERS = 10
MAX_SERIES_CREATORS = 2
CREATOR_SEPARATOR = ", "

# Mapping des IDs de genre TMDB (films) vers noms affiches
# Source: https://api.themoviedb.org/3/genre/movie/list?language=en-US
TMDB_GENRE_MAPPING = {
    28: "Action",
    12: "Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    14: "Fantasy",
    36: "History",
    27: "Horror",
    10402: "Music",
    9648: "Mystery",
    10749: "Romance",
    878: "Science Fiction",
    10770: "TV Movie",
    53: "Thriller",
    10752: "War",
    37: "Western",
}

# Mapping des IDs de genre TMDB (series) - certains IDs different des films
# Source: https://api.themoviedb.org/3/genre/tv/list?language=en-US
TMDB_TV_GENRE_MAPPING = {
    10759: "Action & Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    10762: "Kids",
    9648: "Mystery",
    10763: "News",
    10764: "Reality",
    10765: "Sci-Fi & Fantasy",
    10766: "Soap",
    10767: "Talk",
    10768: "War & Politics",
    37: "Western",
}

# Mots-cles de contenu explicite (correspondance par sous-chaine, insensible a la casse)
CONTENT_DENY_LIST = (
    "porn",
    "xxx",
    "erotic",
    "hentai",
    "nude",
    "nudity",
    "sexual",
    "adult film",
    "adult video",
    "playboy",
    "stripper",
    "fetish",
    "orgy",
    "softcore",
    "hardcore",
)

# Mots-cles du titre/resume vers genres (migration des entrees anciennes)
# L'ordre du tuple definit l'ordre des genres deduits.
BACKFILL_GENRE_KEYWORDS = (
    ("Action", ("action", "fight", "battle", "mission", "explosive")),
    ("Adventure", ("adventure", "journey", "quest", "expedition")),
    ("Animation", ("animated", "animation", "pixar", "anime")),
    ("Comedy", ("comedy", "funny", "hilarious", "comedic")),
    ("Crime", ("crime", "heist", "gangster", "mafia", "detective", "murder")),
    ("Documentary", ("documentary", "true story of", "real-life")),
    ("Drama", ("drama", "family", "struggle", "compelling", "emotional")),
    ("Fantasy", ("magic", "wizard", "dragon", "fantasy", "kingdom")),
    ("Horror", ("horror", "haunted", "demon", "terrifying", "zombie")),
    ("Mystery", ("mystery", "mysterious", "secret", "disappearance")),
    ("Romance", ("love story", "romance", "romantic", "falls in love")),
    ("Science Fiction", ("space", "alien", "future", "robot", "dream", "sci-fi", "time travel")),
    ("Thriller", ("thriller", "gripping", "edge of your seat", "conspiracy", "suspense")),
    ("War", ("war", "soldier", "army")),
    ("Western", ("western", "cowboy", "outlaw")),
)

# Titres connus (en minuscules) vers (distribution, realisateur/createurs)
BACKFILL_TITLE_CREDITS = {
    "inception": (
        ("Leonardo DiCaprio", "Joseph Gordon-Levitt", "Elliot Page", "Tom Hardy"),
        "Christopher Nolan",
    ),
    "interstellar": (
        ("Matthew McConaughey", "Anne Hathaway", "Jessica Chastain", "Michael Caine"),
        "Christopher Nolan",
    ),
    "the dark knight": (
        ("Christian Bale", "Heath Ledger", "Aaron Eckhart", "Gary Oldman"),
        "Christopher Nolan",
    ),
    "the matrix": (
        ("Keanu Reeves", "Laurence Fishburne", "Carrie-Anne Moss", "Hugo Weaving"),
        "Lana Wachowski",
    ),
    "pulp fiction": (
        ("John Travolta", "Samuel L. Jackson", "Uma Thurman", "Bruce Willis"),
        "Quentin Tarantino",
    ),
    "la la land": (
        ("Ryan Gosling", "Emma Stone", "John Legend"),
        "Damien Chazelle",
    ),
    "parasite": (
        ("Song Kang-ho", "Lee Sun-kyun", "Cho Yeo-jeong", "Choi Woo-shik"),
        "Bong Joon-ho",
    ),
    "stranger things": (
        ("Winona Ryder", "David Harbour", "Millie Bobby Brown", "Finn Wolfhard"),
        "Matt Duffer, Ross Duffer",
    ),
    "breaking bad": (
        ("Bryan Cranston", "Aaron Paul", "Anna Gunn", "Dean Norris"),
        "Vince Gilligan",
    ),
    "the office": (
        ("Steve Carell", "Rainn Wilson", "John Krasinski", "Jenna Fischer"),
        "Greg Daniels",
    ),
    "game of thrones": (
        ("Emilia Clarke", "Kit Harington", "Peter Dinklage", "Lena Headey"),
        "David Benioff, D. B. Weiss",
    ),
    "the last of us": (
        ("Pedro Pascal", "Bella Ramsey", "Gabriel Luna"),
        "Craig Mazin, Neil Druckmann",
    ),
}
