"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe
FANARTAPI_, et peut optionnellement etre fournie via un fichier .env.

Les cles API sont optionnelles : sans cle, le header api-key n'est pas envoye
et l'API fanart.tv refusera probablement la requete.
"""

from pathlib import Path
from typing import Optional

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fanartapi.adapters.api.fanart_client import ClientConfig


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe FANARTAPI_.
    Exemple : FANARTAPI_API_KEY=xxx, FANARTAPI_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="FANARTAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Cles API (OPTIONNELLES)
    api_key: Optional[str] = Field(default=None)
    client_key: Optional[str] = Field(default=None)

    # Logging (stderr, fichier JSON optionnel avec rotation)
    log_level: str = Field(default="WARNING")
    log_file: Optional[Path] = Field(default=None)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Etend ~ vers le repertoire home dans les chemins."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Met le niveau de log en majuscules (debug -> DEBUG)."""
        return v.upper()

    @property
    def api_enabled(self) -> bool:
        """Verifie si une cle API fanart.tv est configuree."""
        return bool(self.api_key)

    def client_config(
        self, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> ClientConfig:
        """Construit la configuration du client fanart.tv."""
        return ClientConfig(
            api_key=self.api_key or "",
            client_key=self.client_key or "",
            transport=transport,
        )
