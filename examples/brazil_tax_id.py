from docval.utils.tax_id_utils import TaxIdError, TaxIdUtils


def main() -> None:
    cpf = "123.456.789-09"
    try:
        TaxIdUtils.validate(cpf)
        print("CPF válido!")
    except TaxIdError as err:
        print(f"CPF inválido: {err.message}")

    cnpj = "12.345.678/0001-95"
    try:
        TaxIdUtils.validate(cnpj)
        print("CNPJ válido!")
    except TaxIdError as err:
        print(f"CNPJ inválido: {err.message}")


if __name__ == "__main__":
    main()
