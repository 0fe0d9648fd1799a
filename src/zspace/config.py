import logging
import os
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

ENV_PREFIX = "ZSPACE_"


def _parse_ownership(value: str):
    from .indexing.buffer_ownership import BufferOwnership

    return BufferOwnership.from_name(value)


def _parse_indent(value: str) -> int | None:
    if value.strip() == "":
        return None
    indent = int(value)
    if indent < 0:
        raise ValueError(f"json_indent must be non-negative: {value!r}")
    return indent


@dataclass(frozen=True)
class ConfigOption:
    default: str
    parse: Callable[[str], Any]


options: dict[str, ConfigOption] = {
    "buffer_ownership": ConfigOption("cloned", _parse_ownership),
    "json_indent": ConfigOption("", _parse_indent),
}


class Config(Mapping):
    """
    Read-only view over the ``ZSPACE_`` environment variables. Values are read
    and parsed again on every lookup. Unknown keys raise ``KeyError``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def raw(self, key: str) -> str:
        option = options[key]
        return self.environ.get(ENV_PREFIX + key.upper(), option.default)

    def __getitem__(self, key: str) -> Any:
        if key not in options:
            raise KeyError(f"Unknown zspace config option: {key!r}")
        raw = self.raw(key)
        value = options[key].parse(raw)
        logger.debug("config %s=%r (raw %r)", key, value, raw)
        return value

    def __iter__(self) -> Iterator[str]:
        return iter(options)

    def __len__(self) -> int:
        return len(options)


config = Config()
