"""
Requetes fanart.tv : images et latest.

Objets valeur purs (aucune I/O) associant un QueryType a une cible et
produisant le chemin relatif de l'endpoint. execute() delegue l'appel
HTTP au client.

Usage:
    request = images(QueryType.MOVIE, "tt0137523")
    result = await request.execute(client)
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from fanartapi.core.models import ImagesResult, LatestResult
from fanartapi.core.query_type import QueryType

if TYPE_CHECKING:
    from fanartapi.adapters.api.fanart_client import FanartClient


@dataclass(frozen=True)
class ImagesRequest:
    """
    Requete des images d'une entite.

    Attributs:
        type: Type d'entite interrogee
        query: Identifiant libre (IMDb, TMDb, TheTVDB ou MusicBrainz) ;
               l'API amont determine sa nature d'apres son format
    """

    type: QueryType
    query: str

    @property
    def path(self) -> str:
        """Chemin relatif de l'endpoint, ex: "movies/tt0137523"."""
        return f"{self.type.api_type}/{self.query}"

    async def execute(self, client: "FanartClient") -> ImagesResult:
        """Execute la requete avec le client et retourne le resultat decode."""
        return await client.do(self.path, ImagesResult)


@dataclass(frozen=True)
class LatestRequest:
    """Requete des dernieres entites mises a jour pour un type."""

    type: QueryType

    @property
    def path(self) -> str:
        """Chemin relatif de l'endpoint, ex: "tv/latest"."""
        return f"{self.type.api_type}/latest"

    async def execute(self, client: "FanartClient") -> list[LatestResult]:
        """Execute la requete avec le client et retourne les entrees decodees."""
        return await client.do(self.path, list[LatestResult])


FanartRequest = Union[ImagesRequest, LatestRequest]


def images(type: QueryType, query: str) -> ImagesRequest:
    """Cree une requete images pour type et query."""
    return ImagesRequest(type=type, query=query)


def latest(type: QueryType) -> LatestRequest:
    """Cree une requete latest pour type."""
    return LatestRequest(type=type)
