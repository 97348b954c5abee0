"""
Application configuration settings.

This module contains configuration settings for the application,
including the data file location, the admin API key, server binding
and logging options.
"""
import os
import logging.config
from pathlib import Path
from dotenv import load_dotenv
from typing import Dict, Any, List

DEFAULT_ADMIN_KEY = 'admin123'


class Settings:
    """Application settings class."""

    def __init__(self, **overrides: Any):
        # Load environment variables from .env file if it exists
        load_dotenv()

        # Base directory of the project
        self.BASE_DIR = Path(__file__).resolve().parent.parent

        # Initialize all settings
        self._load_settings()

        for key, value in overrides.items():
            setattr(self, key, value)

    def _load_settings(self) -> None:
        """Load all settings from environment variables."""
        # Storage
        self.DATA_FILE = Path(os.getenv('DATA_FILE', str(self.BASE_DIR / 'data' / 'data.json')))

        # Security settings
        self.ADMIN_KEY = os.getenv('ADMIN_KEY', DEFAULT_ADMIN_KEY)

        # Server settings
        self.HOST = os.getenv('HOST', '0.0.0.0')
        self.PORT = int(os.getenv('PORT', '3000'))

        # Application settings
        self.APP_NAME = os.getenv('APP_NAME', 'Payroll Keeper')
        self.APP_ENV = os.getenv('APP_ENV', 'development')
        self.DEBUG = os.getenv('DEBUG', 'false').lower() == 'true'
        self.CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

        # Streamlit front-end
        self.API_URL = os.getenv('API_URL', 'http://localhost:3000')

        # Logging
        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG' if self.DEBUG else 'INFO').upper()
        self.LOG_FILE = os.getenv('LOG_FILE') or None

    @property
    def cors_origins_list(self) -> List[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(',') if origin.strip()]

    @property
    def uses_default_admin_key(self) -> bool:
        return self.ADMIN_KEY == DEFAULT_ADMIN_KEY

    @property
    def LOGGING_CONFIG(self) -> Dict[str, Any]:
        """Logging configuration for ``logging.config.dictConfig``."""
        handlers = ['console']
        config = {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'standard': {
                    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
                },
            },
            'handlers': {
                'console': {
                    'level': self.LOG_LEVEL,
                    'class': 'logging.StreamHandler',
                    'formatter': 'standard'
                },
            },
            'loggers': {
                '': {  # root logger
                    'handlers': handlers,
                    'level': self.LOG_LEVEL,
                    'propagate': True
                },
            }
        }

        if self.LOG_FILE:
            Path(self.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
            config['handlers']['file'] = {
                'level': 'DEBUG',
                'class': 'logging.FileHandler',
                'filename': self.LOG_FILE,
                'formatter': 'standard'
            }
            handlers.append('file')

        return config


def configure_logging(app_settings: 'Settings') -> None:
    """Apply the logging configuration of the given settings."""
    logging.config.dictConfig(app_settings.LOGGING_CONFIG)


# Create settings instance
settings = Settings()
