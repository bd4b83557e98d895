# tests/test_router.py

from pathlib import Path

from fastapi.testclient import TestClient

from api import app
from rescisao.config import settings

client = TestClient(app)

CONTRATO_CENARIO = {
    "data_admissao": "2023-12-03",
    "data_demissao": "2025-12-03",
    "motivo": "dispensa",
    "tipo_aviso": "indenizado",
    "salario_base": 2500.0,
}


def test_root_online():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "online"


def test_calcular_cenario():
    # Act
    response = client.post("/api/v1/rescisao/calcular", json={"contrato": CONTRATO_CENARIO})
    # Assert
    assert response.status_code == 200
    rescisao = response.json()["rescisao"]
    assert rescisao["dias_aviso"] == 36
    assert rescisao["valor_aviso"] == 3000.0
    assert rescisao["avos_13"] == 11
    assert rescisao["projecao_aviso"] == "2026-01-08"
    assert rescisao["motivo"] == "dispensa"
    assert rescisao["is_pedido_demissao"] is False
    rubricas = [linha["Rubrica"] for linha in response.json()["demonstrativo"]]
    assert "Aviso Prévio Indenizado" in rubricas


def test_calcular_com_fgts_e_ajustes():
    # Arrange
    payload = {
        "contrato": CONTRATO_CENARIO,
        "fgts": {"saldo_manual": 10000.0},
        "ajustes": [{"descricao": "Comissão", "valor": 100.0, "tipo": "Provento"}],
    }
    # Act
    response = client.post("/api/v1/rescisao/calcular", json=payload)
    # Assert
    assert response.status_code == 200
    rescisao = response.json()["rescisao"]
    assert rescisao["saldo_fgts_base"] == 10000.0
    assert rescisao["total_ajustes_proventos"] == 100.0
    assert rescisao["ajustes"] == [{"descricao": "Comissão", "valor": 100.0, "tipo": "Provento"}]


def test_calcular_datas_invertidas_retorna_400():
    contrato = {**CONTRATO_CENARIO, "data_demissao": "2023-01-01"}
    response = client.post("/api/v1/rescisao/calcular", json={"contrato": contrato})
    assert response.status_code == 400


def test_calcular_salario_negativo_retorna_422():
    contrato = {**CONTRATO_CENARIO, "salario_base": -1}
    response = client.post("/api/v1/rescisao/calcular", json={"contrato": contrato})
    assert response.status_code == 422


def test_salario_minimo():
    response = client.get("/api/v1/rescisao/salario-minimo", params={"data": "2023-06-15"})
    assert response.status_code == 200
    assert response.json() == {"data": "2023-06-15", "valor": 1320.0}


def test_competencias_fgts_preenchidas_com_minimo():
    # Act
    response = client.post(
        "/api/v1/rescisao/fgts/competencias",
        json={"data_admissao": "2025-01-10", "data_demissao": "2025-04-05", "preencher_salario_minimo": True},
    )
    # Assert
    assert response.status_code == 200
    dados = response.json()
    assert [d["competencia"] for d in dados["depositos"]] == ["2025-01", "2025-02", "2025-03"]
    assert all(d["valor"] == 121.44 for d in dados["depositos"])
    assert dados["total"] == 364.32


def test_competencias_fgts_zeradas():
    response = client.post(
        "/api/v1/rescisao/fgts/competencias",
        json={"data_admissao": "2025-01-10", "data_demissao": "2025-04-05"},
    )
    assert response.json()["total"] == 0.0


def test_relatorio_gera_arquivos(tmp_path, monkeypatch):
    # Arrange
    monkeypatch.setattr(settings, "REPORT_OUTPUT_DIR", str(tmp_path))
    # Act
    response = client.post(
        "/api/v1/rescisao/relatorio",
        json={"contrato": CONTRATO_CENARIO, "texto_assinatura": "Recebi os valores acima."},
    )
    # Assert
    assert response.status_code == 200
    assert Path(response.json()["pdf"]).exists()
    assert Path(response.json()["csv"]).exists()
