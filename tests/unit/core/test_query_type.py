"""
Tests pour l'enumeration QueryType.

Verifie les segments API, les noms d'affichage et la resolution depuis
du texte (utilisee par la CLI).
"""

import pytest

from fanartapi.core.query_type import QueryType


class TestApiType:
    """Tests du segment de chemin API."""

    @pytest.mark.parametrize(
        "query_type, expected",
        [
            (QueryType.MOVIE, "movies"),
            (QueryType.SERIES, "tv"),
            (QueryType.MUSIC_ARTIST, "music"),
            (QueryType.MUSIC_ALBUM, "music/albums"),
            (QueryType.MUSIC_LABEL, "music/labels"),
        ],
    )
    def test_api_type(self, query_type: QueryType, expected: str) -> None:
        """Chaque type correspond a son segment API."""
        assert query_type.api_type == expected

    def test_api_types_do_not_overlap(self) -> None:
        """Deux types ne partagent jamais le meme segment."""
        api_types = [member.api_type for member in QueryType]
        assert len(set(api_types)) == len(QueryType) == 5
        assert set(api_types) == {"movies", "tv", "music", "music/albums", "music/labels"}


class TestDisplayName:
    """Tests du nom d'affichage."""

    def test_str_returns_display_name(self) -> None:
        assert str(QueryType.MOVIE) == "movie"
        assert str(QueryType.SERIES) == "series"
        assert str(QueryType.MUSIC_ARTIST) == "artist"
        assert str(QueryType.MUSIC_ALBUM) == "album"
        assert str(QueryType.MUSIC_LABEL) == "label"

    def test_display_names_are_unique(self) -> None:
        names = {member.display_name for member in QueryType}
        assert len(names) == len(QueryType)


class TestParse:
    """Tests de QueryType.parse."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("movie", QueryType.MOVIE),
            ("MOVIE", QueryType.MOVIE),
            ("series", QueryType.SERIES),
            ("tv", QueryType.SERIES),
            ("artist", QueryType.MUSIC_ARTIST),
            ("music", QueryType.MUSIC_ARTIST),
            ("music-album", QueryType.MUSIC_ALBUM),
            ("MUSIC_ALBUM", QueryType.MUSIC_ALBUM),
            ("music/labels", QueryType.MUSIC_LABEL),
            ("  label ", QueryType.MUSIC_LABEL),
        ],
    )
    def test_parse_known_values(self, text: str, expected: QueryType) -> None:
        assert QueryType.parse(text) is expected

    def test_parse_unknown_value_raises(self) -> None:
        with pytest.raises(ValueError, match="unknown query type"):
            QueryType.parse("podcast")
