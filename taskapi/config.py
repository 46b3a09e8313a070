import os


class Config:
    HOST: str = os.getenv('TASKAPI_HOST', '127.0.0.1')
    PORT: int = int(os.getenv('TASKAPI_PORT', '5000'))
    DEBUG: bool = os.getenv('TASKAPI_DEBUG', 'false').lower() == 'true'
    LOG_LEVEL: str = os.getenv('TASKAPI_LOG_LEVEL', 'INFO').upper()
    # Docs follow DEBUG unless set explicitly
    ENABLE_DOCS: bool = os.getenv('TASKAPI_ENABLE_DOCS', str(DEBUG)).lower() == 'true'

config = Config()
