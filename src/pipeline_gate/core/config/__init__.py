# src/pipeline_gate/core/config/__init__.py

"""
Camada de configuração do Pipeline Gate.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar e identificar a configuração do validador, e por materializar os
limites de aceitação de jobs (`ValidationLimits`).

A configuração é:
    - declarativa
    - determinística
    - opcional (os defaults embutidos reproduzem os limites canônicos)

Limites explícitos:
    - Não valida documentos de pipeline
    - Não interage com os checkers diretamente
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigFileNotFoundError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    InvalidLimitError,
    UnserializableConfigError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash  # noqa: F401
from .limits import (  # noqa: F401
    DEFAULT_CONFIG,
    IMPLICIT_FIRST_JOB,
    MAX_ENVIRONMENT_VARS,
    MAX_PERMUTATIONS,
    RESERVED_STEP_PREFIX,
    ValidationLimits,
    limits_from_config,
)
from .loader import load_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
