"""
Job Schema Checker — forma mínima de um job executável.

Regras (uma violação por regra quebrada, sem interromper na primeira):
    - `commands`: obrigatório, lista com pelo menos um step; cada step é um
      mapeamento com `name` string
    - `image`: obrigatório, string não vazia
    - `environment`: opcional, mapeamento com no máximo `max_environment_vars`
      entradas
    - `matrix`: opcional, mapeamento de variável para lista de valores

Campos desconhecidos são permitidos e ignorados.

As regras são declaradas em `JOB_SCHEMA`, na ordem em que são avaliadas;
a ordem das mensagens é, portanto, estável.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from pipeline_gate.core.config.limits import ValidationLimits
from pipeline_gate.core.errors import ValidationErrorPayload, schema_violation


_MISSING = object()

# (valor do campo, limites) -> lista de descrições de violação
FieldCheck = Callable[[Any, ValidationLimits], List[str]]


@dataclass(frozen=True)
class FieldRule:
    """Restrição declarativa sobre um campo de JobDefinition."""

    name: str
    required: bool
    check: FieldCheck


def _check_commands(value: Any, limits: ValidationLimits) -> List[str]:
    if not isinstance(value, list):
        return ['"commands" must be an array']
    if not value:
        return ['"commands" requires at least one step']

    problems = []
    for i, step in enumerate(value):
        if not isinstance(step, dict) or not isinstance(step.get("name"), str):
            problems.append(f'"commands[{i}]" must be an object with a string "name"')
    return problems


def _check_image(value: Any, limits: ValidationLimits) -> List[str]:
    if not isinstance(value, str) or not value:
        return ['"image" must be a non-empty string']
    return []


def _check_environment(value: Any, limits: ValidationLimits) -> List[str]:
    if not isinstance(value, dict):
        return ['"environment" must be an object']
    if len(value) > limits.max_environment_vars:
        return [
            f'"environment" can only have {limits.max_environment_vars} '
            f"environment variables defined"
        ]
    return []


def _check_matrix(value: Any, limits: ValidationLimits) -> List[str]:
    if not isinstance(value, dict):
        return ['"matrix" must be an object']
    return [
        f'"matrix.{var}" must be an array'
        for var, candidates in value.items()
        if not isinstance(candidates, list)
    ]


JOB_SCHEMA: List[FieldRule] = [
    FieldRule(name="commands", required=True, check=_check_commands),
    FieldRule(name="image", required=True, check=_check_image),
    FieldRule(name="environment", required=False, check=_check_environment),
    FieldRule(name="matrix", required=False, check=_check_matrix),
]


def check_job_schema(
    job: Any,
    prefix: str,
    *,
    limits: Optional[ValidationLimits] = None,
) -> List[ValidationErrorPayload]:
    """Valida a forma de um job e retorna todas as violações encontradas."""
    limits = limits or ValidationLimits()

    if not isinstance(job, dict):
        return [schema_violation(prefix=prefix, field_name="", description="must be an object")]

    errors: List[ValidationErrorPayload] = []
    for rule in JOB_SCHEMA:
        value = job.get(rule.name, _MISSING)
        if value is _MISSING:
            if rule.required:
                errors.append(
                    schema_violation(
                        prefix=prefix,
                        field_name=rule.name,
                        description=f'"{rule.name}" is required',
                    )
                )
            continue

        for description in rule.check(value, limits):
            errors.append(schema_violation(prefix=prefix, field_name=rule.name, description=description))

    return errors


def job_field(job: Any, name: str, default: Any) -> Any:
    """Lê um campo do job tolerando jobs malformados (já reportados pelo schema)."""
    if not isinstance(job, dict):
        return default
    value = job.get(name, default)
    return value if isinstance(value, type(default)) else default

