"""
Workflow — geração e validação da ordem linear de execução dos jobs.

O workflow é a sequência de nomes de jobs executados após o job implícito
`main`. Quando o documento não declara um workflow, a ordem padrão é a
ordem de declaração dos jobs (ordem de inserção do `dict`), sem `main`.

Regras de validação:
    - o workflow é uma lista de strings
    - `main` nunca aparece explicitamente
    - as entradas formam exatamente o multiconjunto de jobs declarados
      (sem `main`): faltas, jobs desconhecidos e duplicatas são rejeitados
    - `jobs` declara o job `main`

Suporta apenas uma ordem linear; topologias paralelas/em série não fazem
parte do contrato.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List

from pipeline_gate.core.config.limits import IMPLICIT_FIRST_JOB
from pipeline_gate.core.errors import (
    ValidationErrorPayload,
    workflow_contains_implicit_job,
    workflow_job_set_mismatch,
    workflow_malformed,
    workflow_missing_implicit_job,
)


def default_workflow(jobs: Dict[str, Any]) -> List[str]:
    """
    Lista de jobs na ordem de declaração, sem a primeira ocorrência de `main`.

    Nomes que não são strings ficam de fora; o orquestrador os reporta.
    """
    job_names = [name for name in jobs if isinstance(name, str)]
    if IMPLICIT_FIRST_JOB in job_names:
        job_names.remove(IMPLICIT_FIRST_JOB)
    return job_names


def generate_workflow(doc: Dict[str, Any]) -> Any:
    """
    Retorna o workflow declarado ou, na ausência dele, o workflow padrão.

    Não muta o documento; a atribuição é responsabilidade do orquestrador.
    """
    if "workflow" in doc:
        return doc["workflow"]
    return default_workflow(doc["jobs"])


def validate_workflow(workflow: Any, jobs: Dict[str, Any]) -> List[ValidationErrorPayload]:
    if not isinstance(workflow, list) or not all(isinstance(name, str) for name in workflow):
        return [workflow_malformed(received=type(workflow).__name__)]

    if IMPLICIT_FIRST_JOB in workflow:
        return [workflow_contains_implicit_job(job_name=IMPLICIT_FIRST_JOB)]

    errors: List[ValidationErrorPayload] = []
    if IMPLICIT_FIRST_JOB not in jobs:
        errors.append(workflow_missing_implicit_job(job_name=IMPLICIT_FIRST_JOB))

    expected = Counter(default_workflow(jobs))
    actual = Counter(workflow)
    if actual != expected:
        errors.append(
            workflow_job_set_mismatch(
                missing=[name for name in expected if name not in actual],
                unexpected=[name for name in actual if name not in expected],
                duplicated=[name for name, count in actual.items() if count > 1],
            )
        )

    return errors
