"""Key/value line formatting for album and track output."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class KeyValueFormatter:
    """Aligns keys so the output is easy to edit and read back in."""

    key_padding: int = 60
    single_delimiter: str = " = "
    multi_delimiter: str = " : "
    value_delimiter: str = ", "

    def format_single(self, key: str, value: object) -> str:
        return f"{key:<{self.key_padding}}{self.single_delimiter}{value}"

    def format_multi(self, key: str, values: Iterable[object]) -> str:
        joined = self.value_delimiter.join(str(v) for v in values)
        return f"{key:<{self.key_padding}}{self.multi_delimiter}{joined}"
