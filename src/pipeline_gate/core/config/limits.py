# src/pipeline_gate/core/config/limits.py
"""
Limites de aceitação de jobs do Pipeline Gate.

Os limites fazem parte do contrato observável do validador: definem a
fronteira entre um job aceito e um job rejeitado. Por isso são expostos
como constantes nomeadas e como uma estrutura imutável sobrescrevível
via configuração, nunca embutidos silenciosamente nos checkers.

Fronteiras:
    - `max_environment_vars`: máximo de variáveis (environment + matrix)
    - `max_permutations`: máximo de permutações geradas por `matrix`
    - Ambas são inclusivas (25 é aceito, 26 é rejeitado)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .errors import InvalidLimitError


# O tamanho real do ambiente é limitado por espaço, não por quantidade;
# o limite mantém definições de pipeline simples.
MAX_ENVIRONMENT_VARS = 25
# Acima disso a matrix deixa de ser tratável pelo executor.
MAX_PERMUTATIONS = 25

# Prefixo reservado a steps gerados pelo próprio sistema.
RESERVED_STEP_PREFIX = "sd-"
# Job implícito executado sempre primeiro (nunca listado no workflow).
IMPLICIT_FIRST_JOB = "main"


DEFAULT_CONFIG: Dict[str, Any] = {
    "limits": {
        "max_environment_vars": MAX_ENVIRONMENT_VARS,
        "max_permutations": MAX_PERMUTATIONS,
    },
}


@dataclass(frozen=True)
class ValidationLimits:
    """Limites efetivos aplicados por uma execução do validador."""

    max_environment_vars: int = MAX_ENVIRONMENT_VARS
    max_permutations: int = MAX_PERMUTATIONS

    def __post_init__(self) -> None:
        _require_positive_int("max_environment_vars", self.max_environment_vars)
        _require_positive_int("max_permutations", self.max_permutations)

    def to_dict(self) -> Dict[str, int]:
        return {
            "max_environment_vars": self.max_environment_vars,
            "max_permutations": self.max_permutations,
        }


def _require_positive_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidLimitError(f"limits.{name} must be a positive integer, got: {value!r}")


def limits_from_config(config: Dict[str, Any] | None) -> ValidationLimits:
    """
    Materializa `ValidationLimits` a partir de uma configuração resolvida.

    Chaves ausentes assumem os valores padrão; a seção `limits`, quando
    presente, deve ser um mapeamento.

    Raises:
        InvalidLimitError: se `limits` não for um mapeamento ou algum
            limite não for um inteiro positivo.
    """
    section = (config or {}).get("limits")
    if section is None:
        return ValidationLimits()
    if not isinstance(section, dict):
        raise InvalidLimitError(f"limits must be a mapping, got: {type(section).__name__}")

    return ValidationLimits(
        max_environment_vars=section.get("max_environment_vars", MAX_ENVIRONMENT_VARS),
        max_permutations=section.get("max_permutations", MAX_PERMUTATIONS),
    )
