"""
Integração com pydantic: tipos de campo que validam CPF/CNPJ.
Erros do validador viram ValueError, que o pydantic reporta como
ValidationError com o nome do campo em `loc`.
"""
from typing import Annotated, Callable

from pydantic import AfterValidator

from docval.utils.tax_id_utils import DocumentKind, TaxIdError, TaxIdUtils


def validator(value: str) -> str:
    """
    Valida CPF ou CNPJ para uso como validador de campo.
    Parâmetros:
        value (str): documento em qualquer formato
    Retorno:
        str: documento apenas com dígitos
    """
    try:
        TaxIdUtils.validate(value)
    except TaxIdError as exc:
        raise ValueError(exc.message) from exc
    return TaxIdUtils.normalize(value)


def _validator_for(expected: DocumentKind) -> Callable[[str], str]:
    def _validate(value: str) -> str:
        try:
            kind = TaxIdUtils.validate(value)
        except TaxIdError as exc:
            raise ValueError(exc.message) from exc
        if kind is not expected:
            raise ValueError(f"Esperado {expected.name}, recebido {kind.name}")
        return TaxIdUtils.normalize(value)
    return _validate


TaxId = Annotated[str, AfterValidator(validator)]
Cpf = Annotated[str, AfterValidator(_validator_for(DocumentKind.CPF))]
Cnpj = Annotated[str, AfterValidator(_validator_for(DocumentKind.CNPJ))]
