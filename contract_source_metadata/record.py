"""
Contract source metadata record.

This module defines the immutable record a contract exposes through its
`contract_source_metadata` query: the source version, a link to the source
and the list of standards the contract claims to implement.
"""

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .constants import METADATA_STANDARD, METADATA_STANDARD_VERSION
from .errors import ValidationError

EntryLike = Union["StandardEntry", Mapping[str, Any]]


@dataclass(frozen=True)
class StandardEntry:
    """
    One standard (or extension) the contract claims to implement.

    Both fields are opaque, non-empty strings. Case and normalization of the
    identifier are left to the deployer.
    """

    standard: str
    version: str

    def __post_init__(self):
        _require_text(self.standard, "standard")
        _require_text(self.version, "version")

    @classmethod
    def from_public_view(cls, view: Mapping[str, Any]) -> "StandardEntry":
        if not isinstance(view, Mapping):
            raise ValidationError(
                f"Standard entry must be an object, got {type(view).__name__}"
            )
        for key in ("standard", "version"):
            if key not in view:
                raise ValidationError(f"Standard entry is missing '{key}'", field=key)
        return cls(standard=view["standard"], version=view["version"])

    def to_public_view(self) -> Dict[str, str]:
        return {"standard": self.standard, "version": self.version}


@dataclass(frozen=True)
class MetadataRecord:
    """
    Self-description of a deployed contract.

    Every field is independently optional and None means "absent". For
    `standards`, absent (not declared) is distinct from an empty tuple
    (declares zero standards). Records are never mutated: use `replace()`
    or the `with_*` helpers to derive a new one.

    Args:
        version: Commit hash, build identifier or freeform tag
        link: URI-like pointer to the source (repository URL, CID, ...)
        standards: StandardEntry objects or {'standard', 'version'} mappings

    Raises:
        ValidationError: If a field has the wrong type or a standards entry
            has an empty identifier or version
    """

    version: Optional[str] = None
    link: Optional[str] = None
    standards: Optional[Tuple[StandardEntry, ...]] = None

    def __post_init__(self):
        if self.version is not None and not isinstance(self.version, str):
            raise ValidationError("version must be a string", field="version")
        if self.link is not None and not isinstance(self.link, str):
            raise ValidationError("link must be a string", field="link")

        if self.standards is not None:
            object.__setattr__(self, "standards", _coerce_entries(self.standards))

    @classmethod
    def empty(cls) -> "MetadataRecord":
        """Record with all three fields absent."""
        return cls()

    @classmethod
    def from_public_view(cls, view: Mapping[str, Any]) -> "MetadataRecord":
        """
        Build a record from its public view.

        Keys that are missing or null are treated as absent. Unknown keys are
        ignored so views produced by newer revisions of the standard still load.

        Args:
            view: Mapping shaped like the `contract_source_metadata` result

        Returns:
            Validated MetadataRecord
        """
        if not isinstance(view, Mapping):
            raise ValidationError(
                f"Metadata view must be an object, got {type(view).__name__}"
            )

        return cls(
            version=view.get("version"),
            link=view.get("link"),
            standards=view.get("standards"),
        )

    @classmethod
    def from_json(cls, data: Union[bytes, str]) -> "MetadataRecord":
        """
        Decode a record from its JSON encoding.

        Raises:
            ValueError: If the payload is not valid UTF-8 JSON
            ValidationError: If the decoded view is not a valid record
        """
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return cls.from_public_view(json.loads(data))

    def to_public_view(self) -> Dict[str, Any]:
        """
        Get the externally visible shape of the record.

        Absent fields are omitted; an empty standards list is kept.

        Returns:
            Plain dict with any of 'version', 'link' and 'standards'
        """
        view: Dict[str, Any] = {}
        if self.version is not None:
            view["version"] = self.version
        if self.link is not None:
            view["link"] = self.link
        if self.standards is not None:
            view["standards"] = [entry.to_public_view() for entry in self.standards]
        return view

    def to_json(self) -> bytes:
        """Canonical compact JSON encoding of the public view."""
        return json.dumps(
            self.to_public_view(), separators=(",", ":"), sort_keys=True
        ).encode("utf-8")

    def is_empty(self) -> bool:
        return self.version is None and self.link is None and self.standards is None

    def declares(self, standard: str, version: Optional[str] = None) -> bool:
        """
        Check whether the record lists a standard.

        Args:
            standard: Standard identifier (e.g. 'nep171')
            version: Exact version to match; any version if omitted

        Returns:
            True if a matching entry is declared
        """
        for entry in self.standards or ():
            if entry.standard == standard and (version is None or entry.version == version):
                return True
        return False

    def duplicate_standards(self) -> List[str]:
        """Identifiers listed more than once, in first-seen order."""
        seen = set()
        duplicates: List[str] = []
        for entry in self.standards or ():
            if entry.standard in seen and entry.standard not in duplicates:
                duplicates.append(entry.standard)
            seen.add(entry.standard)
        return duplicates

    def is_self_declared(self) -> bool:
        """True if the record lists the metadata standard itself."""
        return self.declares(METADATA_STANDARD)

    def replace(self, **changes: Any) -> "MetadataRecord":
        """Copy of the record with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def with_standard(self, standard: str, version: str) -> "MetadataRecord":
        """Copy of the record with one more standards entry appended."""
        entries = tuple(self.standards or ()) + (StandardEntry(standard, version),)
        return self.replace(standards=entries)

    def with_self_declaration(self) -> "MetadataRecord":
        """
        Copy of the record that lists the metadata standard itself.

        The entry is prepended; records that already declare it are
        returned unchanged.
        """
        if self.is_self_declared():
            return self
        entry = StandardEntry(METADATA_STANDARD, METADATA_STANDARD_VERSION)
        return self.replace(standards=(entry,) + tuple(self.standards or ()))


def _require_text(value: Any, field: str, index: Optional[int] = None):
    if not isinstance(value, str):
        raise ValidationError(
            f"Standard entry '{field}' must be a string, got {type(value).__name__}",
            field=field,
            index=index,
        )
    if not value:
        raise ValidationError(f"Standard entry '{field}' must not be empty", field=field, index=index)


def _coerce_entries(entries: Iterable[EntryLike]) -> Tuple[StandardEntry, ...]:
    if isinstance(entries, (str, bytes, Mapping)) or not isinstance(entries, Iterable):
        raise ValidationError("standards must be a list of entries", field="standards")

    coerced = []
    for index, entry in enumerate(entries):
        try:
            if not isinstance(entry, StandardEntry):
                entry = StandardEntry.from_public_view(entry)
        except ValidationError as e:
            raise ValidationError(
                f"Invalid standards entry at index {index}: {e}",
                field=e.field,
                index=index,
            ) from e
        coerced.append(entry)
    return tuple(coerced)
