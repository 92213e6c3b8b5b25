"""
Decodage tolerant des champs renvoyes par fanart.tv.

L'API amont serialise ses champs numeriques de facon incoherente : tantot
en chaine ("12"), tantot en nombre (12), parfois vide ("") et, pour la
saison, avec la valeur sentinelle "all". Ce module normalise ces valeurs
champ par champ, tout en gardant un schema ferme : un champ inconnu ou une
valeur non entiere fait echouer tout le decodage.

Les normaliseurs sont appliques par les modeles (core/models.py) via des
validateurs pydantic "before" ; decode() est le point d'entree unique qui
traduit les erreurs pydantic en DecodeError.
"""

import re
from functools import lru_cache
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from fanartapi.core.errors import DecodeError

# Entier base 10 : signe optionnel, chiffres ASCII, aucun espace
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

SEASON_ALL = "all"
INSECURE_SCHEME = "http://"
SECURE_SCHEME = "https://"


def parse_count(value: Any, field: str) -> int:
    """
    Convertit un champ numerique amont en entier.

    Args:
        value: Valeur brute (chaine, entier ou null)
        field: Nom du champ, repris dans le message d'erreur

    Returns:
        L'entier decode, 0 si la valeur est vide ou null

    Raises:
        ValueError: Si la valeur n'est pas un entier en base 10
    """
    if value is None or value == "":
        return 0
    # bool est une sous-classe de int
    if isinstance(value, bool):
        raise ValueError(f"invalid {field}: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value):
        return int(value)
    raise ValueError(f"invalid {field}: {value!r}")


def parse_season(value: Any) -> int:
    """
    Convertit le champ season, ou "all" signifie "toutes les saisons".

    "all" et "" donnent 0, exactement comme une saison 0 reelle :
    les deux cas ne sont pas distinguables apres decodage.
    """
    if value == SEASON_ALL:
        return 0
    return parse_count(value, "season")


def none_as_empty(value: Any) -> Any:
    """Remplace un null JSON par une chaine vide, laisse le reste intact."""
    return "" if value is None else value


def secure_url(url: str) -> str:
    """
    Force le schema https sur une URL http.

    Les URL deja en https, ou sans schema reconnu, sont renvoyees telles quelles.
    """
    if url.startswith(INSECURE_SCHEME):
        return SECURE_SCHEME + url[len(INSECURE_SCHEME):]
    return url


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    """Retourne le TypeAdapter pydantic pour une forme cible (mis en cache)."""
    return TypeAdapter(shape)


def _error_location(loc: tuple) -> Optional[str]:
    """Construit l'emplacement pointe d'une erreur (ex: "albums.x.cdart.0.size")."""
    if not loc:
        return None
    return ".".join(str(part) for part in loc)


def decode(shape: Any, payload: Any) -> Any:
    """
    Decode une reponse fanart.tv vers la forme cible, en mode schema ferme.

    Args:
        shape: Type cible (ex: ImagesResult, list[LatestResult])
        payload: Corps JSON (bytes ou str) ou objet Python deja decode

    Returns:
        Instance entierement construite de shape

    Raises:
        DecodeError: Champ inconnu, valeur invalide ou JSON malforme.
                     Aucun resultat partiel n'est produit.
    """
    adapter = _adapter(shape)
    try:
        if isinstance(payload, (bytes, bytearray, str)):
            return adapter.validate_json(payload)
        return adapter.validate_python(payload)
    except ValidationError as e:
        first = e.errors()[0]
        raise DecodeError(_error_location(first["loc"]), first["msg"]) from e
