"""
Client fanart.tv API v3.

Execute les requetes images et latest : construit l'URL absolue, ajoute les
headers d'authentification, verifie le statut HTTP et decode la reponse en
mode schema ferme.

Pas de cache, pas de retry, pas de timeout impose : la fiabilite releve du
transport fourni par l'appelant, et l'annulation passe par la tache asyncio
appelante (ex: asyncio.timeout()).

Usage:
    async with FanartClient(ClientConfig(api_key="xxx")) as client:
        result = await client.images(QueryType.MOVIE, "tt0137523")
        print(result.name, result.canonical_id)

Reference API: https://fanart.tv/api-docs/api-v3/
"""

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

import httpx
from loguru import logger

from fanartapi.core.decoding import decode
from fanartapi.core.errors import DecodeError, RequestBuildError, UnexpectedStatusError
from fanartapi.core.models import ImagesResult, LatestResult
from fanartapi.core.query_type import QueryType
from fanartapi.core.requests import images, latest

if TYPE_CHECKING:
    from fanartapi.config import Settings


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration du client fanart.tv.

    Attributs:
        api_key: Cle API du projet ("" = header api-key omis)
        client_key: Cle personnelle de l'utilisateur ("" = header client-key omis)
        transport: Transport httpx a utiliser (None = transport par defaut)
    """

    api_key: str = ""
    client_key: str = ""
    transport: Optional[httpx.AsyncBaseTransport] = None


class FanartClient:
    """
    Client pour l'API fanart.tv.

    La configuration est en lecture seule apres construction : une meme
    instance peut servir plusieurs appels concurrents. Le client HTTP
    sous-jacent est cree a la premiere requete et reutilise ensuite
    (connection pooling).

    Attributes:
        BASE_URL: URL de base de l'API fanart.tv v3

    Example:
        client = FanartClient(ClientConfig(api_key="xxx"))
        latest = await client.latest(QueryType.SERIES)
        for entry in latest:
            print(entry.name, entry.canonical_id)
        await client.close()
    """

    BASE_URL = "https://webservice.fanart.tv/v3/"

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        """
        Initialise le client fanart.tv.

        Args:
            config: Cles et transport ; configuration vide si None
        """
        self._config = config or ClientConfig()
        self._client: Optional[httpx.AsyncClient] = None
        self._client_loop: Optional[asyncio.AbstractEventLoop] = None

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "FanartClient":
        """Cree un client a partir des parametres de l'application."""
        return cls(settings.client_config(transport=transport))

    @property
    def config(self) -> ClientConfig:
        """Configuration du client."""
        return self._config

    @property
    def api_key(self) -> str:
        return self._config.api_key

    @property
    def client_key(self) -> str:
        return self._config.client_key

    @property
    def transport(self) -> Optional[httpx.AsyncBaseTransport]:
        return self._config.transport

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        timeout=None : aucun delai n'est impose par ce client, l'appelant
        borne lui-meme la duree de ses appels.

        Les connexions du pool sont liees a la boucle asyncio qui les a
        ouvertes : un nouveau client est cree quand l'appel se fait depuis
        une autre boucle (ex: plusieurs asyncio.run() successifs).
        """
        loop = asyncio.get_running_loop()
        if self._client is not None and self._client_loop is not loop:
            logger.debug("Nouvelle boucle asyncio, recreation du client HTTP")
            self._client = None
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                transport=self._config.transport,
                timeout=None,
                follow_redirects=True,
            )
            self._client_loop = loop
        return self._client

    def headers(self) -> dict[str, str]:
        """Headers envoyes avec chaque requete."""
        headers = {"Accept": "application/json"}
        if self._config.api_key:
            headers["api-key"] = self._config.api_key
        if self._config.client_key:
            headers["client-key"] = self._config.client_key
        return headers

    async def do(self, path: str, shape: Any) -> Any:
        """
        Execute une requete GET sur path et decode la reponse vers shape.

        Args:
            path: Chemin relatif de l'endpoint (ex: "movies/tt0137523")
            shape: Forme cible du decodage (ex: ImagesResult, list[LatestResult])

        Returns:
            Instance decodee de shape

        Raises:
            RequestBuildError: Si l'URL construite est invalide
            httpx.TransportError: Erreur reseau, DNS ou TLS (non enveloppee)
            UnexpectedStatusError: Si le statut HTTP n'est pas 200
            DecodeError: Si la reponse ne respecte pas le schema
            asyncio.CancelledError: Si la tache appelante est annulee
        """
        url = self.BASE_URL + path
        client = self._get_client()
        try:
            request = client.build_request("GET", url, headers=self.headers())
        except httpx.InvalidURL as e:
            raise RequestBuildError(path, str(e)) from e

        logger.debug(f"GET {url}")
        try:
            response = await client.send(request)
        except httpx.TransportError as e:
            logger.warning(f"Echec transport pour {url}: {e!r}")
            raise

        if response.status_code != httpx.codes.OK:
            logger.warning(f"Statut inattendu {response.status_code} pour {url}")
            raise UnexpectedStatusError(response.status_code, url)

        try:
            return decode(shape, response.content)
        except DecodeError as e:
            logger.warning(f"Reponse invalide pour {url}: {e}")
            raise

    async def images(self, type: QueryType, id: str) -> ImagesResult:
        """
        Recupere les images fanart.tv de l'entite id.

        Args:
            type: Type d'entite (film, serie, artiste, album, label)
            id: Identifiant IMDb, TMDb, TheTVDB ou MusicBrainz

        Returns:
            ImagesResult decode
        """
        return await images(type, id).execute(self)

    async def latest(self, type: QueryType) -> list[LatestResult]:
        """Recupere les dernieres entites mises a jour pour type."""
        return await latest(type).execute(self)

    async def close(self) -> None:
        """
        Ferme le client HTTP et libere les ressources.

        Un transport fourni par l'appelant n'est pas ferme : il peut etre
        partage entre plusieurs clients et reste a la charge de l'appelant.
        """
        if self._client:
            if self._config.transport is None:
                await self._client.aclose()
            self._client = None
            self._client_loop = None

    async def __aenter__(self) -> "FanartClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
