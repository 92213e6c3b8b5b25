"""
Modeles des reponses de l'API fanart.tv v3.

Objets valeur immutables (pydantic, frozen) construits a partir des reponses
JSON. Le schema est ferme (extra="forbid") a tous les niveaux : un champ
inconnu fait echouer le decodage, ce qui signale tot une evolution de l'API.

Exports :
- ImageAsset : une image (poster, logo, fond...)
- ImagesResult : reponse d'une requete images (/{type}/{id})
- LatestResult : une entree d'une requete latest (/{type}/latest)
- ARTWORK_CATEGORIES : noms JSON des categories d'images
"""

from types import MappingProxyType
from typing import Any, Iterator, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from fanartapi.core.decoding import (
    none_as_empty,
    parse_count,
    parse_season,
    secure_url,
)

ARTWORK_CATEGORIES: tuple[str, ...] = (
    "clearart",
    "clearlogo",
    "hdclearart",
    "hdlogo",
    "hdmovieclearart",
    "hdmovielogo",
    "hdmusiclogo",
    "hdtvlogo",
    "movieart",
    "characterart",
    "moviebackground",
    "moviebanner",
    "moviedisc",
    "movielogo",
    "movieposter",
    "moviethumb",
    "artistthumb",
    "seasonbanner",
    "seasonposter",
    "seasonthumb",
    "showbackground",
    "artistbackground",
    "tvbanner",
    "tvposter",
    "tvthumb",
    "musiclogo",
    "musicbanner",
    "musiclabel",
)


class ImageAsset(BaseModel):
    """
    Une image fanart.tv.

    Attributs:
        id: Identifiant fanart de l'image
        url: URL de l'image, toujours en https
        lang: Code langue (ex: "en", "00" pour sans texte)
        colour: Couleur dominante (images musicales), "" si absente
        disc_type: Type de disque (ex: "bluray", "cd"), "" si absent
        likes: Nombre de votes
        season: Numero de saison, 0 si non renseigne ou "all"
        disc: Numero de disque
        size: Taille du disque (ex: 1000 pour cdart)

    Note: season == 0 couvre a la fois "toutes les saisons" et une vraie
    saison 0 (specials) ; l'API ne permet pas de les distinguer.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = ""
    url: str = ""
    lang: str = ""
    colour: str = ""
    disc_type: str = ""
    likes: int = 0
    season: int = 0
    disc: int = 0
    size: int = 0

    @field_validator("id", "url", "lang", "colour", "disc_type", mode="before")
    @classmethod
    def _null_string(cls, value: Any) -> Any:
        return none_as_empty(value)

    @field_validator("likes", "disc", "size", mode="before")
    @classmethod
    def _count(cls, value: Any, info: ValidationInfo) -> int:
        return parse_count(value, info.field_name)

    @field_validator("season", mode="before")
    @classmethod
    def _season(cls, value: Any) -> int:
        return parse_season(value)

    @field_validator("url")
    @classmethod
    def _https(cls, value: str) -> str:
        return secure_url(value)


Artwork = tuple[ImageAsset, ...]


class ImagesResult(BaseModel):
    """
    Reponse d'une requete images.

    Les identifiants alternatifs dependent du type interroge : tmdb_id et
    imdb_id pour les films, tvdb_id pour les series, mbid pour la musique.
    Chaque categorie d'images est un tuple ordonne d'ImageAsset ; albums
    associe un MBID d'album a ses categories (albumcover, cdart...).
    albums est expose en lecture seule (MappingProxyType). Le modele reste
    non hashable a cause de ce mapping.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = ""
    fanart_id: str = Field(default="", alias="id")
    imdb_id: str = ""
    tmdb_id: str = ""
    tvdb_id: str = Field(default="", alias="thetvdb_id")
    mbid: str = Field(default="", alias="mbid_id")

    clearart: Artwork = ()
    clearlogo: Artwork = ()
    hdclearart: Artwork = ()
    hdlogo: Artwork = ()
    hdmovieclearart: Artwork = ()
    hdmovielogo: Artwork = ()
    hdmusiclogo: Artwork = ()
    hdtvlogo: Artwork = ()
    movieart: Artwork = ()
    characterart: Artwork = ()
    moviebackground: Artwork = ()
    moviebanner: Artwork = ()
    moviedisc: Artwork = ()
    movielogo: Artwork = ()
    movieposter: Artwork = ()
    moviethumb: Artwork = ()
    artistthumb: Artwork = ()
    seasonbanner: Artwork = ()
    seasonposter: Artwork = ()
    seasonthumb: Artwork = ()
    showbackground: Artwork = ()
    artistbackground: Artwork = ()
    tvbanner: Artwork = ()
    tvposter: Artwork = ()
    tvthumb: Artwork = ()
    musiclogo: Artwork = ()
    musicbanner: Artwork = ()
    musiclabel: Artwork = ()

    albums: Mapping[str, Mapping[str, Artwork]] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("name", "fanart_id", "imdb_id", "tmdb_id", "tvdb_id", "mbid", mode="before")
    @classmethod
    def _null_string(cls, value: Any) -> Any:
        return none_as_empty(value)

    @field_validator(*ARTWORK_CATEGORIES, mode="before")
    @classmethod
    def _null_artwork(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("albums", mode="before")
    @classmethod
    def _null_albums(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("albums")
    @classmethod
    def _readonly_albums(
        cls, value: Mapping[str, Mapping[str, Artwork]]
    ) -> Mapping[str, Mapping[str, Artwork]]:
        return MappingProxyType(
            {album: MappingProxyType(dict(artwork)) for album, artwork in value.items()}
        )

    @field_serializer("albums")
    def _dump_albums(
        self, value: Mapping[str, Mapping[str, Artwork]]
    ) -> dict[str, dict[str, Artwork]]:
        return {album: dict(artwork) for album, artwork in value.items()}

    @property
    def canonical_id(self) -> str:
        """
        Identifiant de la requete d'origine.

        Priorite: MusicBrainz, TheTVDB, IMDb, TMDb, puis identifiant fanart.
        """
        for candidate in (self.mbid, self.tvdb_id, self.imdb_id, self.tmdb_id):
            if candidate:
                return candidate
        return self.fanart_id

    def artwork(self, category: str) -> Artwork:
        """
        Retourne les images d'une categorie a partir de son nom JSON.

        Raises:
            KeyError: Si la categorie n'existe pas
        """
        if category not in ARTWORK_CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)

    def categories(self) -> Iterator[tuple[str, Artwork]]:
        """Itere sur les categories non vides, dans l'ordre de ARTWORK_CATEGORIES."""
        for category in ARTWORK_CATEGORIES:
            assets = getattr(self, category)
            if assets:
                yield category, assets


class LatestResult(BaseModel):
    """
    Entree d'une liste latest (elements recemment mis a jour).

    Attributs:
        fanart_id: Identifiant fanart (ou TheTVDB/MBID selon le type)
        tmdb_id: Identifiant TMDb (films)
        imdb_id: Identifiant IMDb (films)
        name: Nom de l'element
        new_images: Nombre d'images ajoutees
        total_images: Nombre total d'images
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    fanart_id: str = Field(default="", alias="id")
    tmdb_id: str = ""
    imdb_id: str = ""
    name: str = ""
    new_images: int = 0
    total_images: int = 0

    @field_validator("fanart_id", "tmdb_id", "imdb_id", "name", mode="before")
    @classmethod
    def _null_string(cls, value: Any) -> Any:
        return none_as_empty(value)

    @field_validator("new_images", "total_images", mode="before")
    @classmethod
    def _count(cls, value: Any, info: ValidationInfo) -> int:
        return parse_count(value, info.field_name)

    @property
    def canonical_id(self) -> str:
        """Identifiant de l'element : IMDb, puis TMDb, puis identifiant fanart."""
        for candidate in (self.imdb_id, self.tmdb_id):
            if candidate:
                return candidate
        return self.fanart_id
