"""
Dependência FastAPI para validação de CPF/CNPJ em endpoints.
Documento inválido vira HTTP 422 com o código do motivo.
"""
from fastapi import HTTPException

from docval.utils.log_utils import get_logger
from docval.utils.tax_id_utils import TaxIdError, TaxIdUtils

logger = get_logger(__name__)


async def require_valid_tax_id(tax_id: str) -> str:
    """
    Valida o parâmetro `tax_id` (path ou query) antes do endpoint.
    Parâmetros:
        tax_id (str): CPF ou CNPJ em qualquer formato
    Retorno:
        str: documento apenas com dígitos
    """
    try:
        kind = TaxIdUtils.validate(tax_id)
    except TaxIdError as exc:
        logger.warning(f"Documento inválido detectado: motivo={exc.kind.value}, digitos={TaxIdUtils.normalize(tax_id)}")
        raise HTTPException(
            status_code=422,
            detail={"field": "tax_id", "code": exc.kind.value, "message": exc.message},
        )
    logger.info(f"{kind.name} válido recebido")
    return TaxIdUtils.normalize(tax_id)
