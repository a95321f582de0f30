#!/usr/bin/env python3

# Copyright (C) The lsaglib developers
#
# This file is part of lsaglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of lsaglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""lsaglib configuration.

Settings are read from LSAG_* environment variables
(or from a .env file in the working directory), e.g.:

    LSAG_RSA_KEY_SIZE=3072
    LSAG_LOG_LEVEL=DEBUG
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LSAG_", env_file=".env", case_sensitive=True, extra="ignore"
    )

    # RSA key generation
    RSA_KEY_SIZE: int = 2048
    RSA_PUBLIC_EXPONENT: int = 65537

    # bytes of randomness for each ring member scalar
    SCALAR_SIZE: int = 32

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure the root logger according to the settings.

    Meant for applications embedding lsaglib:
    the library itself only creates module level loggers.
    """

    if settings is None:
        settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=settings.LOG_FORMAT)
