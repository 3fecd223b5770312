from __future__ import annotations

from pathlib import Path

import pytest

COMISSAO_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Comissao>
  <Empresa>
    <Fantasia>Loja Centro</Fantasia>
    <Razao>Loja Centro LTDA</Razao>
    <CNPJ>12.345.678/0001-90</CNPJ>
    <MesAno>01/2024</MesAno>
    <Funcionario>
      <CPF>111.111.111-11</CPF>
      <Valor>150.50</Valor>
      <MetaPremio>20.00</MetaPremio>
    </Funcionario>
    <Funcionario>
      <CPF>222.222.222-22</CPF>
      <Valor>99.50</Valor>
    </Funcionario>
  </Empresa>
</Comissao>
"""

VALES_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Vales>
  <Empresa>
    <Fantasia>Loja Sul</Fantasia>
    <Razao>Loja Sul SA</Razao>
    <CNPJ>98.765.432/0001-10</CNPJ>
    <MesAno>02/2024</MesAno>
    <Funcionario>
      <CPF>333.333.333-33</CPF>
      <Valor>40</Valor>
    </Funcionario>
    <Funcionario>
      <CPF>444.444.444-44</CPF>
      <Valor>abc</Valor>
    </Funcionario>
  </Empresa>
</Vales>
"""

EMPTY_XML = """<Comissao>
  <Empresa>
    <Fantasia>Vazia</Fantasia>
    <Razao>Vazia ME</Razao>
    <CNPJ>00.000.000/0001-00</CNPJ>
    <MesAno>03/2024</MesAno>
  </Empresa>
</Comissao>
"""


@pytest.fixture
def comissao_file(tmp_path: Path) -> Path:
    path = tmp_path / "comissao_2024-01.xml"
    path.write_text(COMISSAO_XML, encoding="utf-8")
    return path


@pytest.fixture
def vales_file(tmp_path: Path) -> Path:
    path = tmp_path / "vales_2024-02.xml"
    path.write_text(VALES_XML, encoding="utf-8")
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    path = tmp_path / "comissao_vazia.xml"
    path.write_text(EMPTY_XML, encoding="utf-8")
    return path
