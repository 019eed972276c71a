"""
ValidationContext — contexto canônico de uma validação do Pipeline Gate.

Cada chamada do orquestrador possui seu próprio contexto; nada é
compartilhado entre validações, o que torna validações concorrentes de
documentos distintos seguras sem qualquer lock.

O contexto é o **único meio** de:
- registrar o log estruturado de eventos da validação
- expor a configuração efetiva (e seu hash) usada pelos checkers

Os checkers não recebem o contexto: permanecem funções puras do documento.
"""

from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .config.hashing import compute_config_hash
from .config.merge import deep_merge
from .config.limits import DEFAULT_CONFIG


@dataclass
class ValidationContext:
    """
    Contexto de execução de uma validação.

    Campos canônicos:
    - run_id: identificador único da validação
    - created_at: timestamp UTC de criação do contexto
    - config: configuração efetiva (defaults + overrides)
    - config_hash: hash canônico de `config`
    - events: log estruturado de eventos, em ordem de emissão
    """

    run_id: str
    created_at: str
    config: Dict[str, Any]
    config_hash: str = ""

    events: List[Dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.config_hash:
            self.config_hash = compute_config_hash(self.config)

    @classmethod
    def create(cls, *, config: Optional[Dict[str, Any]] = None) -> "ValidationContext":
        return cls(
            run_id=uuid.uuid4().hex,
            created_at=datetime.now(timezone.utc).isoformat(),
            config=copy.deepcopy(config if config is not None else DEFAULT_CONFIG),
        )

    def override_config(self, override: Dict[str, Any]) -> None:
        """Aplica `override` sobre a configuração efetiva e recalcula o hash."""
        self.config = deep_merge(self.config, override)
        self.config_hash = compute_config_hash(self.config)

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, check: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "check": check,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def events_for(self, check: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("check") == check]
