"""
Pipeline Gate — Canonical Error Structures (v1)

Este módulo define o padrão canônico das violações encontradas durante a
validação funcional de um documento de pipeline.

Cada violação é um artefato de domínio:

- explícito (tipo estável, não texto livre)
- serializável
- localizável (prefixo `Job "<nome>"` ou `Workflow`)
- legível por humanos sem inspeção de código

Violações nunca interrompem a validação: são coletadas e agregadas.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidationErrorPayload:
    """
    Payload canônico de uma violação.

    Campos:
    - type: código estável da violação (ver catálogo abaixo)
    - prefix: contexto da violação (ex.: `Job "build"`, `Workflow`)
    - description: descrição curta e humana
    - details: dados estruturados para diagnóstico
    """

    type: str
    prefix: str
    description: str
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return f"{self.prefix}: {self.description}"

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável da violação."""
        payload = asdict(self)
        payload["message"] = self.message
        return payload


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos (v1)
# ---------------------------------------------------------------------------

# Documento
DOCUMENT_MALFORMED = "DOCUMENT_MALFORMED"

# Jobs
SCHEMA_VIOLATION = "SCHEMA_VIOLATION"
ENVIRONMENT_LIMIT_EXCEEDED = "ENVIRONMENT_LIMIT_EXCEEDED"
PERMUTATION_LIMIT_EXCEEDED = "PERMUTATION_LIMIT_EXCEEDED"
RESERVED_STEP_NAME = "RESERVED_STEP_NAME"

# Workflow
WORKFLOW_MALFORMED = "WORKFLOW_MALFORMED"
WORKFLOW_CONTAINS_IMPLICIT_JOB = "WORKFLOW_CONTAINS_IMPLICIT_JOB"
WORKFLOW_MISSING_IMPLICIT_JOB = "WORKFLOW_MISSING_IMPLICIT_JOB"
WORKFLOW_JOB_SET_MISMATCH = "WORKFLOW_JOB_SET_MISMATCH"

WORKFLOW_PREFIX = "Workflow"
JOBS_PREFIX = "Jobs"


def job_prefix(job_name: str) -> str:
    return f'Job "{job_name}"'


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def document_malformed(*, received: str) -> ValidationErrorPayload:
    return ValidationErrorPayload(
        type=DOCUMENT_MALFORMED,
        prefix=JOBS_PREFIX,
        description="must be an object mapping job names to job definitions",
        details={"received": received},
    )


def job_names_malformed(*, names: List[Any]) -> ValidationErrorPayload:
    received = ", ".join(repr(name) for name in names)
    return ValidationErrorPayload(
        type=DOCUMENT_MALFORMED,
        prefix=JOBS_PREFIX,
        description=f"job names must be strings (received {received})",
        details={"names": [repr(name) for name in names]},
    )


def schema_violation(
    *,
    prefix: str,
    field_name: str,
    description: str,
) -> ValidationErrorPayload:
    return ValidationErrorPayload(
        type=SCHEMA_VIOLATION,
        prefix=prefix,
        description=description,
        details={"field": field_name},
    )


def environment_limit_exceeded(
    *,
    prefix: str,
    limit: int,
    count: int,
) -> ValidationErrorPayload:
    return ValidationErrorPayload(
        type=ENVIRONMENT_LIMIT_EXCEEDED,
        prefix=prefix,
        description=(
            f'"environment" and "matrix" can only have a combined maximum of '
            f"{limit} environment variables defined (currently {count})"
        ),
        details={"limit": limit, "count": count},
    )


def permutation_limit_exceeded(
    *,
    prefix: str,
    limit: int,
    count: int,
) -> ValidationErrorPayload:
    return ValidationErrorPayload(
        type=PERMUTATION_LIMIT_EXCEEDED,
        prefix=prefix,
        description=f'"matrix" cannot contain >{limit} permutations (currently {count})',
        details={"limit": limit, "count": count},
    )


def reserved_step_name(
    *,
    prefix: str,
    step_name: str,
    reserved_prefix: str,
) -> ValidationErrorPayload:
    return ValidationErrorPayload(
        type=RESERVED_STEP_NAME,
        prefix=prefix,
        description=f'Step "{step_name}": cannot use a restricted prefix "{reserved_prefix}"',
        details={"step": step_name, "reserved_prefix": reserved_prefix},
    )


def workflow_malformed(*, received: str) -> ValidationErrorPayload:
    return ValidationErrorPayload(
        type=WORKFLOW_MALFORMED,
        prefix=WORKFLOW_PREFIX,
        description="must be an array of job names",
        details={"received": received},
    )


def workflow_contains_implicit_job(*, job_name: str) -> ValidationErrorPayload:
    return ValidationErrorPayload(
        type=WORKFLOW_CONTAINS_IMPLICIT_JOB,
        prefix=WORKFLOW_PREFIX,
        description=f'"{job_name}" is implied as the first job and must be excluded',
        details={"job": job_name},
    )


def workflow_missing_implicit_job(*, job_name: str) -> ValidationErrorPayload:
    return ValidationErrorPayload(
        type=WORKFLOW_MISSING_IMPLICIT_JOB,
        prefix=WORKFLOW_PREFIX,
        description=f'"{job_name}" must be defined in "jobs"',
        details={"job": job_name},
    )


def workflow_job_set_mismatch(
    *,
    missing: List[str],
    unexpected: List[str],
    duplicated: List[str],
) -> ValidationErrorPayload:
    return ValidationErrorPayload(
        type=WORKFLOW_JOB_SET_MISMATCH,
        prefix=WORKFLOW_PREFIX,
        description='must contain all the jobs listed in "jobs"',
        details={
            "missing": missing,
            "unexpected": unexpected,
            "duplicated": duplicated,
        },
    )
