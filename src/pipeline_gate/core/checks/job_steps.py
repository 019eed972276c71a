"""Job Steps Checker — nomes de step reservados ao sistema."""

from __future__ import annotations

from typing import Any, List

from pipeline_gate.core.config.limits import RESERVED_STEP_PREFIX
from pipeline_gate.core.errors import ValidationErrorPayload, reserved_step_name

from .job_schema import job_field


def check_job_steps(
    job: Any,
    prefix: str,
    *,
    reserved_prefix: str = RESERVED_STEP_PREFIX,
) -> List[ValidationErrorPayload]:
    """
    Reporta cada step cujo `name` começa com o prefixo reservado.

    A comparação é sensível a maiúsculas e considera apenas o início do nome
    (`deploy-sd` é permitido). Steps sem `name` string são ignorados aqui.
    """
    errors: List[ValidationErrorPayload] = []

    for step in job_field(job, "commands", []):
        name = step.get("name") if isinstance(step, dict) else None
        if isinstance(name, str) and name.startswith(reserved_prefix):
            errors.append(
                reserved_step_name(
                    prefix=prefix,
                    step_name=name,
                    reserved_prefix=reserved_prefix,
                )
            )

    return errors
