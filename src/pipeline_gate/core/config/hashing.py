# src/pipeline_gate/core/config/hashing.py
"""
Hashing canônico da configuração do Pipeline Gate.

O hash representa a identidade estrutural da configuração efetiva usada
em uma validação e é registrado no `ValidationContext`, permitindo
associar um relatório de rejeição aos limites que o produziram.

Política de hashing (v1):
    - Serialização JSON canônica (sort_keys, separadores compactos)
    - Codificação UTF-8
    - Algoritmo SHA-256
"""

import hashlib
import json
from typing import Any, Dict

from .errors import UnserializableConfigError


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração efetiva.

    Invariantes:
        - O valor retornado é uma string hexadecimal de 64 caracteres
        - Configurações estruturalmente equivalentes produzem o mesmo hash
        - O hash é independente da ordem original das chaves

    Args:
        config (Dict[str, Any]): Configuração efetiva.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
        UnserializableConfigError: Se algum valor não for serializável em JSON.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config to hash must be a dict, got: {type(config).__name__}"
        )

    try:
        canonical_json = json.dumps(
            config,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as e:
        raise UnserializableConfigError(f"Config is not JSON-serializable: {e}") from e

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
