"""
Client API fanart.tv.

- FanartClient : execution des requetes et decodage des reponses
- ClientConfig : cles API et transport httpx
"""

from fanartapi.adapters.api.fanart_client import ClientConfig, FanartClient

__all__ = [
    "ClientConfig",
    "FanartClient",
]
