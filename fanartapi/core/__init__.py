"""
Couche domaine (core).

Types de requete, modeles de reponse, decodage tolerant et erreurs.
Cette couche ne depend d'aucun transport HTTP.
"""

from fanartapi.core.errors import (
    DecodeError,
    FanartError,
    RequestBuildError,
    UnexpectedStatusError,
)
from fanartapi.core.models import (
    ARTWORK_CATEGORIES,
    ImageAsset,
    ImagesResult,
    LatestResult,
)
from fanartapi.core.query_type import QueryType
from fanartapi.core.requests import (
    FanartRequest,
    ImagesRequest,
    LatestRequest,
    images,
    latest,
)

__all__ = [
    "ARTWORK_CATEGORIES",
    "DecodeError",
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
