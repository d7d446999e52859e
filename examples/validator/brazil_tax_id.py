from pydantic import BaseModel, ValidationError

from docval.api.validators import Cnpj, Cpf


class Citizen(BaseModel):
    cpf: Cpf


class Company(BaseModel):
    cnpj: Cnpj


def main() -> None:
    samples = [
        (Citizen, {"cpf": "123.456.789-09"}),
        (Company, {"cnpj": "12.345.678/0001-95"}),
        (Citizen, {"cpf": "000.000.000-00"}),
        (Company, {"cnpj": "12.345.678/0001-99"}),
    ]
    for model, data in samples:
        try:
            model(**data)
            print(f"{model.__name__} válido!")
        except ValidationError as e:
            print(f"Erros de validação: {e.errors()}")


if __name__ == "__main__":
    main()
