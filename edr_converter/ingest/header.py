"""EDR header block parser.

The header is a fixed-size ASCII block of ``TAG=value`` lines. Only the tags
needed for calibration are interpreted; every other line is ignored.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from edr_converter.errors import FieldParseError, HeaderTagMalformedError
from edr_converter.models.metadata import RecordingMetadata


HEADER_SIZE = 2048

# Characters stripped around a value before numeric parsing (header padding).
_VALUE_PAD = " \t\r\x00"


@dataclass(frozen=True)
class _TagRule:
    prefix: str
    field: str
    parse: Callable[[str], object]
    per_channel: bool = False


# Declaration order does not matter: rules are evaluated longest-prefix-first,
# so "ADCMAX" always wins over "AD".
_RULES: Tuple[_TagRule, ...] = (
    _TagRule("AD", "analog_to_digital_resolution", int),
    _TagRule("ADCMAX", "adc_max", int),
    _TagRule("DT", "sample_interval", float),
    _TagRule("YAG", "channel_gain", int, per_channel=True),
    _TagRule("YCF", "channel_calibration_factor", float, per_channel=True),
    _TagRule("YZ", "channel_zero_offset", int, per_channel=True),
)

_RULES_BY_LENGTH: Tuple[_TagRule, ...] = tuple(sorted(_RULES, key=lambda r: -len(r.prefix)))


def match_tag(line: str) -> Optional[_TagRule]:
    """Return the rule whose prefix matches ``line`` (longest prefix wins), or None."""
    for rule in _RULES_BY_LENGTH:
        if line.startswith(rule.prefix):
            return rule
    return None


def _split_value(rule: _TagRule, line: str) -> Tuple[str, str]:
    """Split a tag line into (key, value) at the last '='."""
    if "=" not in line:
        raise HeaderTagMalformedError(rule.prefix, line)
    key, value = line.rsplit("=", 1)
    return key, value


def _channel_suffix(rule: _TagRule, key: str) -> Optional[int]:
    """Channel number written after the tag (``YZ3`` -> 3), None when absent."""
    suffix = key[len(rule.prefix):].strip()
    if suffix.isdigit():
        return int(suffix)
    return None


def _parse_value(rule: _TagRule, raw: str) -> object:
    text = raw.strip(_VALUE_PAD)
    if "_" in text:
        # int()/float() accept digit separators; header numbers never carry them
        raise FieldParseError(rule.field, raw, reason="digit separator not allowed")
    try:
        return rule.parse(text)
    except (ValueError, OverflowError) as e:
        raise FieldParseError(rule.field, raw, reason=str(e)) from e


def _order_channel_entries(channel_entries: Dict[str, List[Tuple[Optional[int], object]]]) -> Dict[str, tuple]:
    """
    Order per-channel values, deciding once for all per-channel fields.

    Only when every entry of every field carries a channel suffix, distinct
    within its field, are the fields sorted by suffix (header line order then
    does not matter). Otherwise all fields keep arrival order, so YZ, YAG and
    YCF entries stay paired the same way.
    """
    def _suffixed(entries: List[Tuple[Optional[int], object]]) -> bool:
        idx = [i for i, _ in entries]
        return all(i is not None for i in idx) and len(set(idx)) == len(idx)

    present = [entries for entries in channel_entries.values() if entries]
    by_suffix = bool(present) and all(_suffixed(entries) for entries in present)

    out: Dict[str, tuple] = {}
    for name, entries in channel_entries.items():
        if by_suffix:
            entries = sorted(entries, key=lambda e: e[0])
        out[name] = tuple(v for _, v in entries)
    return out


def header_lines(header: bytes) -> List[str]:
    """Decode the header block (one byte = one Latin-1 character) into lines."""
    text = bytes(header).decode("latin-1")
    return [ln[:-1] if ln.endswith("\r") else ln for ln in text.split("\n")]


def parse_header(header: bytes) -> RecordingMetadata:
    """
    Parse the header block into RecordingMetadata.

    Policy:
      - lines are matched case-sensitively against the tag table, longest prefix first
      - the value is everything after the last '=' on the line
      - fields absent from the header keep zero defaults (no validation here)

    Raises
    ------
    HeaderTagMalformedError
        A recognised tag line has no '='.
    FieldParseError
        A recognised tag value is not a valid number; ``.field`` names the field.
    """
    scalars: Dict[str, object] = {}
    channel_entries: Dict[str, List[Tuple[Optional[int], object]]] = {
        r.field: [] for r in _RULES if r.per_channel
    }

    for line in header_lines(header):
        rule = match_tag(line)
        if rule is None:
            continue
        key, raw = _split_value(rule, line)
        value = _parse_value(rule, raw)
        if rule.per_channel:
            channel_entries[rule.field].append((_channel_suffix(rule, key), value))
        else:
            scalars[rule.field] = value

    per_channel = _order_channel_entries(channel_entries)
    return RecordingMetadata(**scalars, **per_channel)
