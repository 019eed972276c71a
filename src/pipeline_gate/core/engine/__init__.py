# src/pipeline_gate/core/engine/__init__.py
"""
Engine do Pipeline Gate.

Este pacote contém o orquestrador da fase funcional: executa os checkers
de job sobre cada job declarado, resolve e valida o workflow e consolida
o resultado em um único estado final (ACCEPTED ou REJECTED).

Princípios fundamentais:
    - Todas as violações são coletadas (sem fail-fast)
    - A mesma entrada sempre produz o mesmo resultado
    - A única mutação do documento é a gravação de `workflow`

Limites explícitos:
    - Não executa jobs
    - Não agenda execução concorrente
    - Não formata erros além de uma lista de mensagens
"""

from .engine import FunctionalPhase, run_functional_phase, validate_document  # noqa: F401
from .types import ValidationResult, ValidationState  # noqa: F401
