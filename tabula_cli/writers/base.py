"""Abstract base for table serializers."""
from abc import ABC, abstractmethod
from typing import Sequence, TextIO

from tabula_cli.models.table import Table


class TableWriter(ABC):
    """Serialize an ordered sequence of tables to a text sink."""

    @abstractmethod
    def write(self, sink: TextIO, tables: Sequence[Table]) -> None:
        """Write *tables* in order. An empty sequence must still yield a valid document."""
        ...
