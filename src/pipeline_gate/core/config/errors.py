# src/pipeline_gate/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Pipeline Gate.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, o merge e a resolução dos limites de validação.

As exceções aqui definidas representam **falhas de configuração do
validador**, e não violações encontradas no documento de pipeline
validado (essas são agregadas em `PipelineValidationError`).

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa violação de um job ou workflow

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do engine nem dos checkers
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Pipeline Gate.

    Permite captura genérica de falhas de configuração, distinguindo-as
    claramente de documentos de pipeline rejeitados.
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de configuração explicitamente
    informado (defaults) não existe no caminho especificado.

    Decisões arquiteturais:
        - Defaults embutidos (`DEFAULT_CONFIG`) sempre existem
        - Um caminho de defaults informado e ausente é erro explícito,
          nunca ignorado silenciosamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"limits": {"max_permutations": 25}}
        - override: {"limits": "strict"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidLimitError(ConfigError):
    """
    Exceção levantada quando um limite de validação não é um inteiro
    positivo (ex.: `max_permutations: 0` ou `max_environment_vars: "25"`).

    Decisões arquiteturais:
        - Não há coerção de tipos (strings numéricas são rejeitadas)
        - `bool` não é aceito como inteiro
    """


class UnserializableConfigError(ConfigError):
    """
    Exceção levantada quando a configuração contém valores sem
    representação JSON canônica (ex.: datas produzidas pelo YAML) e,
    portanto, não pode ser hasheada.
    """
