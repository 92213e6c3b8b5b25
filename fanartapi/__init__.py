"""
fanartapi - Client type pour l'API fanart.tv v3.

Recupere les images (posters, logos, fonds...) et les dernieres mises a
jour pour les films, series, artistes, albums et labels, et decode les
reponses JSON en objets valeur immutables.

Architecture :
- core/ : types de requete, modeles, decodage, erreurs
- adapters/api/ : client HTTP (httpx)
- config.py, logging_config.py, main.py : configuration, logs et CLI

Les logs loguru du package sont desactives par defaut ;
configure_logging() les reactive.
"""

from loguru import logger

from fanartapi.adapters.api import ClientConfig, FanartClient
from fanartapi.core import (
    ARTWORK_CATEGORIES,
    DecodeError,
    FanartError,
    FanartRequest,
    ImageAsset,
    ImagesRequest,
    ImagesResult,
    LatestRequest,
    LatestResult,
    QueryType,
    RequestBuildError,
    UnexpectedStatusError,
    images,
    latest,
)

__version__ = "0.1.0"

logger.disable("fanartapi")

__all__ = [
    "ARTWORK_CATEGORIES",
    "ClientConfig",
    "DecodeError",
    "FanartClient",
    "FanartError",
    "FanartRequest",
    "ImageAsset",
    "ImagesRequest",
    "ImagesResult",
    "LatestRequest",
    "LatestResult",
    "QueryType",
    "RequestBuildError",
    "UnexpectedStatusError",
    "images",
    "latest",
]
