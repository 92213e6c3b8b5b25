"""
Configuration du logging via loguru.

Fournit un logging structure avec :
- Sortie console : lisible par l'humain, coloree
- Sortie fichier (optionnelle) : serialisee en JSON, avec rotation

Le package desactive ses logs a l'import (bibliotheque) ; cette fonction
les reactive pour les applications qui le souhaitent.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def configure_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging du package fanartapi.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log, None pour ne pas ecrire de fichier
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs a conserver
    """
    # Supprime les handlers existants (dont celui par defaut)
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",  # Capture les requetes HTTP (DEBUG)
            format="{message}",
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            compression="zip",
            enqueue=True,
        )

    logger.enable("fanartapi")
    logger.debug("Logging configure", log_file=str(log_file) if log_file else None)
