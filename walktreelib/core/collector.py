"""Data collection and output for walktreelib.

Collectors define what is extracted from each visit. The section writer
is the sink: it renders one labelled block of visits per strategy.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, TextIO, Union

from .node import Node
from .traverser import Visit

SECTION_MARKER = "[#]"


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, visit: Visit) -> Any:
        """Collect data from a single visit.

        Args:
            visit: Node yielded by a traverser, or the in-order sentinel

        Returns:
            Collected data (type depends on collector)
        """
        pass


class ValueCollector(DataCollector):
    """Collects node values; sentinels pass through unchanged."""

    def collect(self, visit: Visit) -> Union[int, str]:
        if isinstance(visit, Node):
            return visit.value
        return visit


class MetadataCollector(DataCollector):
    """Collects the metadata dictionary of each visited node."""

    def collect(self, visit: Visit) -> Dict[str, Any]:
        if isinstance(visit, Node):
            return visit.metadata()
        return {'sentinel': visit}


def format_section(label: str, values: Iterable[Union[int, str]]) -> str:
    """Render one section of output.

    The layout is a marker line, the label followed by a colon, then every
    value followed by a single space, and a closing newline.

    Example:
        >>> format_section("Queue-based BFS", [1, 0, 0])
        '[#]\\nQueue-based BFS:\\n1 0 0 \\n'
    """
    body = "".join(f"{value} " for value in values)
    return f"{SECTION_MARKER}\n{label}:\n{body}\n"


class SectionWriter:
    """Sink that writes labelled sections of visits to a text stream."""

    def __init__(self, stream: TextIO, collector: Optional[DataCollector] = None):
        """Initialize the writer.

        Args:
            stream: Text stream to write to (e.g. ``sys.stdout``)
            collector: Turns visits into printable values
        """
        self.stream = stream
        self.collector = collector or ValueCollector()
        self.sections_written = 0

    def write_section(self, label: str, visits: Iterable[Visit]) -> List[Any]:
        """Collect visits, write them as one section and return the values."""
        values = [self.collector.collect(visit) for visit in visits]
        self.write_values(label, values)
        return values

    def write_values(self, label: str, values: Iterable[Union[int, str]]) -> None:
        """Write already collected values as one section."""
        self.stream.write(format_section(label, values))
        self.sections_written += 1
