"""
Types de requete supportes par l'API fanart.tv.

Chaque type porte un nom d'affichage et le segment de chemin utilise
par l'API v3 (ex: "movies", "music/albums").
"""

from enum import Enum


class QueryType(Enum):
    """Type d'entite media interrogeable sur fanart.tv.

    Valeurs (nom d'affichage, segment API):
        MOVIE: Film ("movie", "movies")
        SERIES: Serie TV ("series", "tv")
        MUSIC_ARTIST: Artiste ("artist", "music")
        MUSIC_ALBUM: Album ("album", "music/albums")
        MUSIC_LABEL: Label ("label", "music/labels")
    """

    MOVIE = ("movie", "movies")
    SERIES = ("series", "tv")
    MUSIC_ARTIST = ("artist", "music")
    MUSIC_ALBUM = ("album", "music/albums")
    MUSIC_LABEL = ("label", "music/labels")

    @property
    def display_name(self) -> str:
        """Nom lisible du type."""
        return self.value[0]

    @property
    def api_type(self) -> str:
        """Segment de chemin de l'API pour ce type."""
        return self.value[1]

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def parse(cls, text: str) -> "QueryType":
        """
        Resout un type depuis son nom d'affichage, son nom ou son segment API.

        La comparaison ignore la casse, et "music-artist" equivaut a
        "MUSIC_ARTIST".

        Args:
            text: Texte a resoudre (ex: "movie", "MUSIC_ALBUM", "music/labels")

        Returns:
            Le QueryType correspondant

        Raises:
            ValueError: Si aucun type ne correspond
        """
        needle = text.strip().lower()
        for member in cls:
            candidates = {
                member.display_name,
                member.api_type,
                member.name.lower(),
                member.name.lower().replace("_", "-"),
            }
            if needle in candidates:
                return member
        raise ValueError(f"unknown query type: {text!r}")
