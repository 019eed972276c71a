# src/pipeline_gate/core/__init__.py
"""
Core do Pipeline Gate.

Este pacote reúne a implementação da fase funcional de validação de
documentos de pipeline: a última barreira antes de uma definição de build
ser entregue ao scheduler.

Componentes principais:
    - config  → limites de aceitação, loader, merge e hashing de configuração
    - checks  → checkers puros de job e de workflow
    - engine  → orquestração e consolidação do resultado
    - context → log estruturado de eventos por validação

Limites explícitos:
    - Não carrega nem achata o documento de origem
    - Não executa nem agenda jobs
"""
