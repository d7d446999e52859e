"""
Módulo utilitário para validação de CPF e CNPJ.
Funções reutilizáveis e testáveis: normalização, classificação pelo
número de dígitos e conferência dos dígitos verificadores (módulo 11).
"""
import re
from enum import Enum
from typing import Optional, Tuple

from docval.utils.log_utils import get_logger

logger = get_logger(__name__)

CPF_STANDARD_LENGTH = 11
CNPJ_STANDARD_LENGTH = 14
CPF_MULTIPLIER_WEIGHTS: Tuple[int, ...] = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_MULTIPLIER_WEIGHTS: Tuple[int, ...] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
VALIDATION_MODULUS = 11

# somente ASCII: \D aceitaria dígitos unicode (ex.: arábico-índicos)
_NON_DIGITS = re.compile(r"[^0-9]")


class DocumentKind(Enum):
    CPF = (CPF_STANDARD_LENGTH, CPF_MULTIPLIER_WEIGHTS)
    CNPJ = (CNPJ_STANDARD_LENGTH, CNPJ_MULTIPLIER_WEIGHTS)

    def __init__(self, length: int, weights: Tuple[int, ...]):
        self.length = length
        self.weights = weights


_KINDS_BY_LENGTH = {kind.length: kind for kind in DocumentKind}


class TaxIdErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    INVALID_LENGTH = "invalid_length"
    ALL_DIGITS_EQUAL = "all_digits_equal"
    INVALID_CHECKSUM = "invalid_checksum"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    TaxIdErrorKind.INVALID_INPUT: "Entrada inválida: nenhum dígito encontrado",
    TaxIdErrorKind.INVALID_LENGTH: "Tamanho inválido: esperado 11 (CPF) ou 14 (CNPJ) dígitos",
    TaxIdErrorKind.ALL_DIGITS_EQUAL: "Todos os dígitos são iguais",
    TaxIdErrorKind.INVALID_CHECKSUM: "Dígitos verificadores inválidos",
}


class TaxIdError(ValueError):
    """Falha de validação de CPF/CNPJ. `kind` indica o motivo."""

    def __init__(self, kind: TaxIdErrorKind):
        super().__init__(kind.message)
        self.kind = kind
        self.message = kind.message


class TaxIdUtils:
    @staticmethod
    def normalize(value: str) -> str:
        """
        Remove caracteres não numéricos do documento.
        Parâmetros:
            value (str): CPF ou CNPJ em qualquer formato
        Retorno:
            str: apenas os dígitos ASCII, na ordem original
        Exemplo: '12.345.678/0001-95' -> '12345678000195'
        """
        return _NON_DIGITS.sub("", value)

    @staticmethod
    def has_all_equal_digits(value: str) -> bool:
        return bool(value) and value == value[0] * len(value)

    @staticmethod
    def document_kind(value: str) -> DocumentKind:
        """
        Identifica o tipo de documento pelo número de dígitos.
        Parâmetros:
            value (str): CPF ou CNPJ em qualquer formato
        Retorno:
            DocumentKind: CPF (11 dígitos) ou CNPJ (14 dígitos)
        Exceções:
            TaxIdError: sem dígitos (INVALID_INPUT) ou tamanho diferente de 11/14 (INVALID_LENGTH)
        """
        digits = TaxIdUtils.normalize(value)
        if not digits:
            raise TaxIdError(TaxIdErrorKind.INVALID_INPUT)
        kind = _KINDS_BY_LENGTH.get(len(digits))
        if kind is None:
            raise TaxIdError(TaxIdErrorKind.INVALID_LENGTH)
        return kind

    @staticmethod
    def calculate_check_digit(digits: str, weights: Tuple[int, ...]) -> int:
        """
        Calcula um dígito verificador (soma ponderada, módulo 11).
        Parâmetros:
            digits (str): dígitos base, mesmo tamanho de `weights`
            weights (tuple): pesos multiplicadores
        Retorno:
            int: 0 se o resto for menor que 2, senão 11 - resto
        """
        if len(digits) != len(weights):
            raise RuntimeError(f"Quantidade de dígitos ({len(digits)}) difere da de pesos ({len(weights)})")
        total = sum(int(d) * w for d, w in zip(digits, weights))
        remainder = total % VALIDATION_MODULUS
        return 0 if remainder < 2 else VALIDATION_MODULUS - remainder

    @staticmethod
    def validate(value: str) -> DocumentKind:
        """
        Valida CPF ou CNPJ pelo algoritmo dos dígitos verificadores.
        Aceita com/sem máscara (pontos, barras, hífens).
        Parâmetros:
            value (str): CPF ou CNPJ em qualquer formato
        Retorno:
            DocumentKind: tipo do documento validado
        Exceções:
            TaxIdError: com o motivo da rejeição em `kind`
        """
        kind = TaxIdUtils.document_kind(value)
        digits = TaxIdUtils.normalize(value)
        if TaxIdUtils.has_all_equal_digits(digits):
            logger.debug(f"{kind.name} rejeitado, dígitos repetidos: {digits}")
            raise TaxIdError(TaxIdErrorKind.ALL_DIGITS_EQUAL)

        # Cálculo dos dígitos verificadores
        length, weights = kind.length, kind.weights
        first = TaxIdUtils.calculate_check_digit(digits[:length - 2], weights[1:])
        second = TaxIdUtils.calculate_check_digit(digits[:length - 1], weights)
        if digits[length - 2:] != f"{first}{second}":
            logger.debug(f"{kind.name} rejeitado, dígitos verificadores: informado={digits[length - 2:]}, calculado={first}{second}")
            raise TaxIdError(TaxIdErrorKind.INVALID_CHECKSUM)
        return kind

    @staticmethod
    def check(value: str) -> Optional[TaxIdErrorKind]:
        """Retorna None se o documento for válido, senão o motivo da rejeição."""
        try:
            TaxIdUtils.validate(value)
        except TaxIdError as exc:
            return exc.kind
        return None

    @staticmethod
    def is_valid(value: str) -> bool:
        return TaxIdUtils.check(value) is None
