import logging
from pathlib import Path
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def get_env_path():
    """Ruta del archivo .env en la raiz del proyecto"""
    return Path(__file__).parent.parent.parent / '.env'


def load_environment_variables():
    """Carga las variables de entorno desde .env si existe"""
    env_path = get_env_path()
    logger.debug(f"Env file path: {env_path} (exists: {env_path.exists()})")

    # Las variables ya definidas en el proceso tienen prioridad
    load_dotenv(env_path, override=False)


def env_bool(value, default=False):
    if value is None or value == '':
        return default
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def env_int(value, default=None):
    if value is None or str(value).strip() == '':
        return default
    return int(value)
