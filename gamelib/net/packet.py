"""Event packets with a fixed set of payload keys."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Union

Payload = Union[None, int, str, list[int], list[str], dict[str, int]]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_payload(key: str, value: object) -> None:
    if value is None or _is_int(value) or isinstance(value, str):
        return
    if isinstance(value, list) and (
        all(_is_int(v) for v in value) or all(isinstance(v, str) for v in value)
    ):
        return
    if isinstance(value, dict) and all(
        isinstance(k, str) and _is_int(v) for k, v in value.items()
    ):
        return
    raise TypeError(f"unsupported payload value for {key!r}: {value!r}")


class Packet:
    """An event name with payload values; only existing keys may be changed."""

    VERSION = 1

    def __init__(
        self, event: str, payload: Mapping[str, Payload], corr_id: str = ""
    ) -> None:
        for key, value in payload.items():
            _check_payload(key, value)
        self.event = event
        self.corr_id = corr_id
        self._payload: dict[str, Payload] = dict(payload)

    @property
    def version(self) -> int:
        return self.VERSION

    @property
    def payload(self) -> Mapping[str, Payload]:
        """A read-only view of the payload."""
        return MappingProxyType(self._payload)

    def set_payload(self, key: str, value: Payload) -> None:
        """Replace the value of an existing ``key``."""
        if key not in self._payload:
            raise ValueError(f"Invalid payload key: {key}")
        _check_payload(key, value)
        self._payload[key] = value

    def __repr__(self) -> str:
        return (
            f"Packet(event={self.event!r}, payload={self._payload!r}, "
            f"corr_id={self.corr_id!r})"
        )