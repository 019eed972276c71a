"""
Job Matrix Checker — limites combinatórios de um job.

Duas restrições independentes:
    - variáveis de `matrix` + variáveis de `environment` não excedem
      `max_environment_vars`
    - o número de permutações da matrix (produto do tamanho das listas de
      candidatos) não excede `max_permutations`

Uma matrix vazia gera exatamente 1 permutação (identidade multiplicativa).
Campos malformados (já reportados pelo Job Schema Checker) são tratados como
vazios, de modo que este checker nunca levanta exceção.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pipeline_gate.core.config.limits import ValidationLimits
from pipeline_gate.core.errors import (
    ValidationErrorPayload,
    environment_limit_exceeded,
    permutation_limit_exceeded,
)

from .job_schema import job_field


def count_permutations(matrix: Dict[str, Any]) -> int:
    """Produto do número de candidatos de cada variável da matrix."""
    permutations = 1
    for candidates in matrix.values():
        if isinstance(candidates, list):
            permutations *= len(candidates)
    return permutations


def check_job_matrix(
    job: Any,
    prefix: str,
    *,
    limits: Optional[ValidationLimits] = None,
) -> List[ValidationErrorPayload]:
    limits = limits or ValidationLimits()
    errors: List[ValidationErrorPayload] = []

    matrix = job_field(job, "matrix", {})
    environment = job_field(job, "environment", {})

    environment_size = len(matrix) + len(environment)
    if environment_size > limits.max_environment_vars:
        errors.append(
            environment_limit_exceeded(
                prefix=prefix,
                limit=limits.max_environment_vars,
                count=environment_size,
            )
        )

    permutations = count_permutations(matrix)
    if permutations > limits.max_permutations:
        errors.append(
            permutation_limit_exceeded(
                prefix=prefix,
                limit=limits.max_permutations,
                count=permutations,
            )
        )

    return errors
