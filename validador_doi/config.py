# Configuración global del validador DOI
import logging
import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Logging
    LOG_LEVEL: str = os.getenv("DOI_LOG_LEVEL", "WARNING").upper()
    
    # Validación
    STRICT_DEFAULT: bool = os.getenv("DOI_STRICT_DEFAULT", "True").lower() == "true"
    
    # Aplicación
    APP_NAME: str = "Validador DOI"
    APP_VERSION: str = "1.0.0"

    @property
    def log_level(self) -> int:
        """Nivel numérico de logging; valores desconocidos caen en WARNING"""
        level = logging.getLevelName(self.LOG_LEVEL)
        return level if isinstance(level, int) else logging.WARNING

settings = Settings()
