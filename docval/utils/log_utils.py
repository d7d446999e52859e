import logging
import os

DEFAULT_LOG_LEVEL = "INFO"


def get_logger(name: str) -> logging.Logger:
    """
    Cria (ou reaproveita) um logger nomeado.
    Nível lido de DOCVAL_LOG_LEVEL; valores desconhecidos caem para INFO.
    Só adiciona StreamHandler se nenhum handler estiver configurado.
    Parâmetros:
        name (str): nome do logger, normalmente __name__
    Retorno:
        logging.Logger
    """
    logger = logging.getLogger(name)
    level_name = os.getenv("DOCVAL_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    logger.setLevel(level)
    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        logger.addHandler(handler)
    return logger
