"""
Test Fixtures

Common bean classes referenced by class path ("fixtures.Service") in
test documents
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class Level(Enum):
    """Log level used for enum coercion tests"""
    DEBUG = "debug"
    INFO = "info"


class DataSource:
    """Data source with literal settings"""
    url: str
    pool_size: int


class Service:
    """Service with a timeout literal"""
    timeout: int


class UserRepository:
    """Repository wired to a data source"""
    db: DataSource
    table: str


class Settings:
    """Every kind of literal the default coercer understands"""
    name: str
    retries: int
    ratio: float
    enabled: bool
    price: Decimal
    level: Level
    limit: Optional[int]
    extra: Any


class PartlyForwardDeclared:
    """One annotation names a class that is never defined"""
    clock: "LaterDefinedClock"
    retries: int
    level: "Level"


class ConstructorConfigured:
    """Types declared only on __init__ parameters"""

    def __init__(self, port: int, host: str = "localhost"):
        self.port = port
        self.host = host


class Untyped:
    """Class without any type hints"""

    def __init__(self):
        self.value = None


def not_a_class():
    """Module attribute that is not a class"""
    return None
