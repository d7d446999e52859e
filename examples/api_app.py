import logging

import uvicorn
from fastapi import Depends, FastAPI
from pydantic import BaseModel

from docval.api.dependencies import require_valid_tax_id
from docval.api.validators import TaxId

app = FastAPI(title="Tax ID API", version="1.0.0")
logger = logging.getLogger(__name__)


class Partner(BaseModel):
    name: str
    document: TaxId


@app.get("/api/v1/tax-ids/{tax_id}")
async def check_tax_id(tax_id: str = Depends(require_valid_tax_id)) -> dict:
    """
    Valida CPF/CNPJ informado no path.
    Parâmetros:
        tax_id (str): documento já validado e normalizado
    Retorno:
        dict: documento normalizado e status
    """
    return {"tax_id": tax_id, "valid": True}


@app.post("/api/v1/partners", status_code=201)
async def create_partner(payload: Partner) -> dict:
    """Documento inválido no corpo gera 422 do próprio FastAPI."""
    logger.info(f"Parceiro recebido: name={payload.name}")
    return payload.model_dump()


if __name__ == "__main__":
    logger.info("Starting Uvicorn server on 0.0.0.0:3000")
    uvicorn.run(app, host="0.0.0.0", port=3000)
