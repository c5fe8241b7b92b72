"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el servicio del hook depende de abstracciones.
"""
