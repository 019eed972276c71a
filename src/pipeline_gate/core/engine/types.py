"""
Tipos canônicos do orquestrador da fase funcional.

- ValidationState  → estados da máquina de validação
- ValidationResult → resultado imutável de uma validação
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from pipeline_gate.core.errors import ValidationErrorPayload


class ValidationState(str, Enum):
    """
    Estados da validação de um documento.

    Transição única: VALIDATING → ACCEPTED | REJECTED. Não existe estado
    de aceitação parcial.
    """
    VALIDATING = "validating"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado de uma validação.

    Campos:
        - state: ACCEPTED ou REJECTED
        - document: o documento recebido (com `workflow` resolvido)
        - errors: violações na ordem canônica (jobs, depois workflow)
        - run_id: identificador do `ValidationContext` que produziu o resultado
    """
    state: ValidationState
    document: Dict[str, Any]
    errors: List[ValidationErrorPayload] = field(default_factory=list)
    run_id: str = ""

    @property
    def accepted(self) -> bool:
        return self.state == ValidationState.ACCEPTED

    @property
    def messages(self) -> List[str]:
        return [e.message for e in self.errors]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run_id": self.run_id,
            "state": self.state.value,
            "workflow": self.document.get("workflow") if isinstance(self.document, dict) else None,
            "errors": [e.to_dict() for e in self.errors],
        }
