# tests/conftest.py
"""
Fixtures compartilhados para testes do Pipeline Gate.

Este módulo define fixtures reutilizáveis que fornecem:
- jobs mínimos e válidos (factory)
- documentos achatados mínimos
- contexto de validação determinístico (ValidationContext)

Decisões arquiteturais:
    - Documentos são dicionários puros, como recebidos após o flattening
    - Cada fixture retorna uma cópia nova (testes podem mutar livremente)
    - Imports do core são realizados de forma lazy

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


@pytest.fixture
def make_job():
    """
    Fixture factory que fornece um job mínimo e válido.

    O job retornado possui um único step e uma imagem; qualquer campo pode
    ser sobrescrito ou adicionado via kwargs. Passar `commands=None` (ou
    qualquer campo como None) remove o campo do job.

    Returns:
        Callable[..., dict]: factory de JobDefinition.
    """
    def _make(**overrides):
        job = {
            "commands": [{"name": "build", "command": "npm install"}],
            "image": "node:18",
        }
        for key, value in overrides.items():
            if value is None:
                job.pop(key, None)
            else:
                job[key] = value
        return job

    return _make


@pytest.fixture
def make_doc(make_job):
    """
    Fixture factory que fornece um documento achatado com `main` e jobs extras.

    Args (da factory):
        *names: nomes de jobs adicionais, na ordem de declaração.
        workflow: workflow explícito (omitido quando não informado).
    """
    _unset = object()

    def _make(*names, workflow=_unset):
        jobs = {"main": make_job()}
        for name in names:
            jobs[name] = make_job(commands=[{"name": f"run-{name}"}])
        doc = {"jobs": jobs}
        if workflow is not _unset:
            doc["workflow"] = workflow
        return doc

    return _make


@pytest.fixture
def example_doc():
    """Documento canônico de ponta a ponta: `main` + `test`, sem workflow."""
    return {
        "jobs": {
            "main": {"commands": [{"name": "build"}], "image": "node"},
            "test": {"commands": [{"name": "run"}], "image": "node"},
        }
    }


@pytest.fixture
def dummy_ctx():
    """
    Fixture que fornece um ValidationContext determinístico.

    `run_id` e `created_at` são fixos; a configuração usa os limites padrão.
    """
    import copy

    from pipeline_gate.core.config.limits import DEFAULT_CONFIG
    from pipeline_gate.core.context import ValidationContext

    return ValidationContext(
        run_id="run-test-001",
        created_at="2026-01-16T00:00:00+00:00",
        config=copy.deepcopy(DEFAULT_CONFIG),
    )
