from dataclasses import asdict
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from rescisao.calculo import fgts
from rescisao.calculo.calculadora import calcular_rescisao
from rescisao.calculo.modelos import (
    Ajuste,
    Contrato,
    DepositoFGTS,
    LedgerFGTS,
    MotivoRescisao,
    Rescisao,
    TipoAjuste,
    TipoAviso,
)
from rescisao.calculo.report_generator import gerar_demonstrativo, gerar_relatorio_rescisao
from rescisao.calculo.tabelas import get_salario_minimo
from rescisao.config import settings
from rescisao.logging_config import log
from rescisao.shared.utils import arredondar

# --- DEFINIÇÃO DO ROUTER ---
router = APIRouter(prefix="/api/v1/rescisao", tags=["Rescisão"])


# --- MODELOS PYDANTIC ---
class ContratoRequest(BaseModel):
    data_admissao: date
    data_demissao: date
    motivo: MotivoRescisao = MotivoRescisao.DISPENSA
    tipo_aviso: TipoAviso = TipoAviso.TRABALHADO
    salario_base: float = Field(0.0, ge=0)
    insalubridade: float = Field(0.0, ge=0)
    ferias_vencidas_qtd: int = Field(0, ge=0)


class DepositoRequest(BaseModel):
    competencia: str = Field(..., pattern=r"^\d{4}-\d{2}$")
    valor: float = 0.0


class FGTSRequest(BaseModel):
    saldo_manual: Optional[float] = Field(None, ge=0)
    depositos: List[DepositoRequest] = []


class AjusteRequest(BaseModel):
    descricao: str
    valor: float = Field(..., gt=0)
    tipo: TipoAjuste = TipoAjuste.PROVENTO


class CalculoRequest(BaseModel):
    contrato: ContratoRequest
    fgts: FGTSRequest = Field(default_factory=FGTSRequest)
    ajustes: List[AjusteRequest] = []


class CompetenciasRequest(BaseModel):
    data_admissao: date
    data_demissao: date
    preencher_salario_minimo: bool = False


class RelatorioRequest(CalculoRequest):
    incluir_assinaturas: bool = True
    texto_assinatura: str = ""


# --- CONVERSÕES ---


def _to_contrato(request: ContratoRequest) -> Contrato:
    return Contrato(**request.model_dump())


def _to_ledger(request: FGTSRequest) -> LedgerFGTS:
    return LedgerFGTS(
        saldo_manual=request.saldo_manual,
        depositos=tuple(DepositoFGTS(competencia=d.competencia, valor=d.valor) for d in request.depositos),
    )


def _to_ajustes(requests: List[AjusteRequest]) -> List[Ajuste]:
    return [Ajuste(descricao=a.descricao, valor=a.valor, tipo=a.tipo) for a in requests]


def _serializar(valor: Any) -> Any:
    """Arredonda dinheiro para centavos e converte datas/enums para JSON."""
    if isinstance(valor, bool) or isinstance(valor, int):
        return valor
    if isinstance(valor, float):
        return arredondar(valor)
    if isinstance(valor, Enum):
        return valor.value
    if isinstance(valor, date):
        return valor.isoformat()
    if isinstance(valor, dict):
        return {k: _serializar(v) for k, v in valor.items()}
    if isinstance(valor, (list, tuple)):
        return [_serializar(v) for v in valor]
    return valor


def rescisao_to_dict(rescisao: Rescisao) -> Dict[str, Any]:
    dados = _serializar(asdict(rescisao))
    dados["is_pedido_demissao"] = rescisao.is_pedido_demissao
    return dados


def _calcular(request: CalculoRequest):
    try:
        contrato = _to_contrato(request.contrato)
        rescisao = calcular_rescisao(contrato, _to_ledger(request.fgts), _to_ajustes(request.ajustes))
    except ValueError as e:
        log.error(f"Contrato rejeitado: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return contrato, rescisao


# --- ENDPOINTS ---


@router.post("/calcular")
def calcular(request: CalculoRequest):
    """
    Calcula a rescisão completa e devolve o demonstrativo junto dos valores.
    """
    _, rescisao = _calcular(request)
    demonstrativo = gerar_demonstrativo(rescisao)
    return {
        "rescisao": rescisao_to_dict(rescisao),
        "demonstrativo": _serializar(demonstrativo.to_dict(orient="records")),
    }


@router.get("/salario-minimo")
def salario_minimo(data: date):
    """Salário mínimo vigente na data informada."""
    return {"data": data.isoformat(), "valor": get_salario_minimo(data)}


@router.post("/fgts/competencias")
def competencias_fgts(request: CompetenciasRequest):
    """
    Gera a lista mensal de depósitos do FGTS (admissão até o mês anterior à
    demissão), zerada ou preenchida com 8% do salário mínimo de cada mês.
    """
    if request.data_demissao < request.data_admissao:
        raise HTTPException(status_code=400, detail="Data de demissão anterior à admissão.")

    depositos = fgts.gerar_competencias(request.data_admissao, request.data_demissao)
    if request.preencher_salario_minimo:
        depositos = fgts.preencher_com_minimo(depositos)

    return {
        "depositos": [{"competencia": d.competencia, "valor": arredondar(d.valor)} for d in depositos],
        "total": arredondar(sum((d.valor for d in depositos), 0.0)),
    }


@router.post("/relatorio")
def gerar_relatorio(request: RelatorioRequest):
    """
    Gera o demonstrativo de valores em PDF e CSV no diretório configurado.
    """
    contrato, rescisao = _calcular(request)
    caminho_pdf, caminho_csv = gerar_relatorio_rescisao(
        rescisao,
        contrato,
        output_path=settings.REPORT_OUTPUT_DIR,
        incluir_assinaturas=request.incluir_assinaturas,
        texto_assinatura=request.texto_assinatura,
    )
    if not caminho_pdf and not caminho_csv:
        raise HTTPException(status_code=500, detail="Erro ao gerar o relatório.")
    return {"pdf": caminho_pdf, "csv": caminho_csv}
