# src/pipeline_gate/__init__.py
"""
Pipeline Gate — validação funcional de documentos de pipeline.

Recebe um documento já achatado (`jobs` + `workflow` opcional) e decide se
ele é executável: limites de ambiente e de matrix por job, nomes de step
reservados e consistência do workflow linear. Retorna o documento com
`workflow` resolvido ou rejeita com o relatório completo de violações.

Princípios centrais:
    - Todas as violações são reportadas, não apenas a primeira
    - Entrada idêntica produz resultado idêntico
    - Nenhuma aceitação parcial
"""

from .core.config import MAX_ENVIRONMENT_VARS, MAX_PERMUTATIONS, ValidationLimits
from .core.engine import ValidationResult, ValidationState, run_functional_phase, validate_document
from .core.exceptions import PipelineValidationError

__all__ = [
    "MAX_ENVIRONMENT_VARS",
    "MAX_PERMUTATIONS",
    "PipelineValidationError",
    "ValidationLimits",
    "ValidationResult",
    "ValidationState",
    "run_functional_phase",
    "validate_document",
]
