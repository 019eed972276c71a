"""
Pipeline Gate — Canonical Exceptions (v1)

Este módulo define a exceção levantada quando um documento de pipeline é
rejeitado pela fase funcional.

Regras:
- Uma única exceção carrega **todas** as violações encontradas.
- A mensagem é a junção das mensagens individuais por quebra de linha,
  na ordem em que foram encontradas.
- Nenhuma aceitação parcial: se esta exceção é levantada, nada do
  documento é considerado válido.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .errors import ValidationErrorPayload


class PipelineValidationError(Exception):
    """Documento de pipeline rejeitado (relatório agregado de violações)."""

    def __init__(self, errors: Sequence[ValidationErrorPayload]):
        self.errors: List[ValidationErrorPayload] = list(errors)
        super().__init__("\n".join(self.messages))

    @property
    def messages(self) -> List[str]:
        return [e.message for e in self.errors]

    def to_dict(self) -> Dict[str, Any]:
        return {"errors": [e.to_dict() for e in self.errors]}
