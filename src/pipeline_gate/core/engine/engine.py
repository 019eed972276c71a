"""
Orquestrador da fase funcional do Pipeline Gate.

Com a lista de jobs já achatada (flattening é externo), esta fase valida
que os jobs executarão como especificado: regras de negócio como excesso de
variáveis de ambiente, steps reservados ou workflow incompleto.

Fluxo (uma única transição VALIDATING → ACCEPTED | REJECTED):
    1. nomes de jobs que não são strings são reportados uma única vez;
       depois, para cada job, na ordem de declaração: schema → matrix → steps
    2. resolve o workflow (declarado ou gerado) e o grava no documento
    3. valida o workflow
    4. nenhuma violação → ACCEPTED; caso contrário → REJECTED com todas

Nenhuma violação interrompe a validação: todas são coletadas.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pipeline_gate.core.checks.job_matrix import check_job_matrix
from pipeline_gate.core.checks.job_schema import check_job_schema
from pipeline_gate.core.checks.job_steps import check_job_steps
from pipeline_gate.core.checks.workflow import generate_workflow, validate_workflow
from pipeline_gate.core.config.limits import ValidationLimits, limits_from_config
from pipeline_gate.core.context import ValidationContext
from pipeline_gate.core.errors import (
    ValidationErrorPayload,
    document_malformed,
    job_names_malformed,
    job_prefix,
)
from pipeline_gate.core.exceptions import PipelineValidationError

from .types import ValidationResult, ValidationState


class FunctionalPhase:
    """Fase funcional canônica (checkers por job + workflow)."""

    def __init__(
        self,
        *,
        limits: Optional[ValidationLimits] = None,
        ctx: Optional[ValidationContext] = None,
    ):
        if ctx is None:
            config = {"limits": limits.to_dict()} if limits is not None else None
            ctx = ValidationContext.create(config=config)
        elif limits is not None:
            ctx.override_config({"limits": limits.to_dict()})
        self.ctx: ValidationContext = ctx
        self.limits: ValidationLimits = limits or limits_from_config(ctx.config)

    def _check_jobs(self, jobs: Dict[str, Any]) -> List[ValidationErrorPayload]:
        errors: List[ValidationErrorPayload] = []
        for job_name, job in jobs.items():
            prefix = job_prefix(job_name)
            job_errors = (
                check_job_schema(job, prefix, limits=self.limits)
                + check_job_matrix(job, prefix, limits=self.limits)
                + check_job_steps(job, prefix)
            )
            self.ctx.log(
                check="job",
                level="ERROR" if job_errors else "INFO",
                message=f"{prefix} checked",
                job=job_name,
                error_count=len(job_errors),
            )
            errors.extend(job_errors)
        return errors

    def _finish(
        self,
        doc: Dict[str, Any],
        errors: List[ValidationErrorPayload],
    ) -> ValidationResult:
        state = ValidationState.REJECTED if errors else ValidationState.ACCEPTED
        self.ctx.log(
            check="phase",
            level="ERROR" if errors else "INFO",
            message=f"document {state.value}",
            state=state.value,
            error_count=len(errors),
        )
        return ValidationResult(state=state, document=doc, errors=list(errors), run_id=self.ctx.run_id)

    def run(self, doc: Dict[str, Any]) -> ValidationResult:
        self.ctx.log(
            check="phase",
            level="INFO",
            message="functional validation started",
            state=ValidationState.VALIDATING.value,
            limits=self.limits.to_dict(),
            config_hash=self.ctx.config_hash,
        )

        jobs = doc.get("jobs") if isinstance(doc, dict) else None
        if not isinstance(jobs, dict):
            return self._finish(doc, [document_malformed(received=type(jobs).__name__)])

        errors: List[ValidationErrorPayload] = []
        invalid_names = [name for name in jobs if not isinstance(name, str)]
        if invalid_names:
            errors.append(job_names_malformed(names=invalid_names))
        errors.extend(self._check_jobs(jobs))

        generated = "workflow" not in doc
        doc["workflow"] = generate_workflow(doc)
        self.ctx.log(
            check="workflow",
            level="INFO",
            message="workflow generated" if generated else "workflow declared",
            workflow=doc["workflow"],
        )

        workflow_errors = validate_workflow(doc["workflow"], jobs)
        if workflow_errors:
            self.ctx.log(
                check="workflow",
                level="ERROR",
                message="workflow rejected",
                error_count=len(workflow_errors),
            )
        errors.extend(workflow_errors)

        return self._finish(doc, errors)


def validate_document(
    doc: Dict[str, Any],
    *,
    limits: Optional[ValidationLimits] = None,
    ctx: Optional[ValidationContext] = None,
) -> ValidationResult:
    """Valida um documento achatado sem levantar exceção para violações."""
    return FunctionalPhase(limits=limits, ctx=ctx).run(doc)


def run_functional_phase(
    doc: Dict[str, Any],
    *,
    limits: Optional[ValidationLimits] = None,
    ctx: Optional[ValidationContext] = None,
) -> Dict[str, Any]:
    """
    Executa a fase funcional sobre um documento achatado.

    Returns:
        O mesmo documento, com `workflow` presente e válido.

    Raises:
        PipelineValidationError: com todas as violações, em ordem canônica,
            unidas por quebra de linha.
    """
    result = validate_document(doc, limits=limits, ctx=ctx)
    if not result.accepted:
        raise PipelineValidationError(result.errors)
    return result.document
