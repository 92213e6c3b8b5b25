"""
Exceptions levees par le client fanart.tv.

Hierarchie:
- FanartError : base commune
- RequestBuildError : URL de requete invalide
- UnexpectedStatusError : statut HTTP different de 200
- DecodeError : reponse JSON non conforme au schema attendu

Les erreurs de transport (httpx.TransportError) et l'annulation
(asyncio.CancelledError) ne sont pas enveloppees et remontent telles quelles.
"""

from typing import Optional


class FanartError(Exception):
    """Erreur de base du client fanart.tv."""


class RequestBuildError(FanartError):
    """
    Exception levee quand l'URL de la requete ne peut pas etre construite.

    Attributes:
        path: Chemin relatif de l'endpoint a l'origine de l'erreur
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"invalid request path {path!r}: {reason}")


class UnexpectedStatusError(FanartError):
    """
    Exception levee quand l'API retourne un statut different de 200.

    Aucun statut n'est traite specialement (401, 404 et 429 compris) :
    la decision de relancer appartient a l'appelant.

    Attributes:
        status_code: Statut HTTP observe
        url: URL appelee
    """

    def __init__(self, status_code: int, url: str = "") -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"status {status_code} != 200")


class DecodeError(FanartError, ValueError):
    """
    Exception levee quand la reponse ne respecte pas le schema ferme.

    Couvre deux cas : un champ inconnu (derive du schema amont) ou un champ
    numerique dont la valeur n'est pas un entier.

    Attributes:
        field: Emplacement du champ fautif (ex: "moviethumb.0.likes"),
               ou None si le corps n'est pas du JSON valide
        reason: Message d'erreur d'origine
    """

    def __init__(self, field: Optional[str], reason: str) -> None:
        self.field = field
        self.reason = reason
        if field:
            super().__init__(f"invalid {field}: {reason}")
        else:
            super().__init__(f"invalid response: {reason}")
