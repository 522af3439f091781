"""
Components whose qualifier literal cannot be coerced
"""

from kotbeans import component, qualifier


@component
class Alpha:
    name: str = qualifier("first")


@component
class BadTimeout:
    timeout: int = qualifier("soon")


@component
class Omega:
    pass
