"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.
Características:
- Zero dependências externas (banco, HTTP, mensageria)
- 100% testável sem infraestrutura
- Agnóstico a infraestrutura
"""
