"""
Checkers da fase funcional do Pipeline Gate.

Cada checker é uma função pura do documento (ou de um job) que retorna a
lista de violações encontradas, sem levantar exceção e sem interromper na
primeira violação:

- job_schema → forma mínima do job (commands, image, environment, matrix)
- job_matrix → limites de variáveis e de permutações
- job_steps  → prefixo de step reservado (`sd-`)
- workflow   → geração do workflow padrão e validação do workflow efetivo

Apenas o orquestrador (`core.engine`) muta o documento.
"""

from .job_matrix import check_job_matrix, count_permutations  # noqa: F401
from .job_schema import JOB_SCHEMA, FieldRule, check_job_schema  # noqa: F401
from .job_steps import check_job_steps  # noqa: F401
from .workflow import default_workflow, generate_workflow, validate_workflow  # noqa: F401
