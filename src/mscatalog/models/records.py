"""Catalog record data models for mscatalog.

This module defines the in-memory schema for manuscript metadata and
location records. All query modules consume records in this format.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

# Column groups of the main metadata table
SCALAR_FIELDS: tuple[str, ...] = ("unique_id", "author", "death_date", "century")
SEQUENCE_FIELDS: tuple[str, ...] = ("categories", "titles", "shuhras")
MANUSCRIPT_FIELDS: tuple[str, ...] = (
    "unique_id",
    "categories",
    "titles",
    "author",
    "shuhras",
    "death_date",
    "century",
)

# Keys of a single ms_locations object
LOCATION_FIELDS: tuple[str, ...] = ("library", "country", "city", "catalog_num")


@dataclass(frozen=True)
class Manuscript:
    """One catalog entry.

    Attributes
    ----------
    unique_id : str
        Catalog-assigned identifier. Not globally uniform: may carry an
        alphabetic prefix or Arabic-indic digits.
    categories : tuple[str, ...]
        Subject tags in source order, not deduplicated.
    titles : tuple[str, ...]
        Titles; the first one is the display title.
    author : str
        Author name, possibly empty.
    shuhras : tuple[str, ...]
        Alternate names or epithets of the author.
    death_date : str
        Free-text death date, possibly empty.
    century : str
        Coarse century bucket, free text.
    """

    unique_id: str
    categories: tuple[str, ...] = ()
    titles: tuple[str, ...] = ()
    author: str = ""
    shuhras: tuple[str, ...] = ()
    death_date: str = ""
    century: str = ""

    @property
    def display_title(self) -> str:
        """First title, or an empty string when the record has none."""
        return self.titles[0] if self.titles else ""

    @property
    def alternate_titles(self) -> tuple[str, ...]:
        """Titles after the display title."""
        return self.titles[1:]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary in column order."""
        data = asdict(self)
        return {
            name: list(data[name]) if name in SEQUENCE_FIELDS else data[name]
            for name in MANUSCRIPT_FIELDS
        }


@dataclass(frozen=True)
class LocationEntry:
    """A known physical copy of a manuscript.

    Attributes
    ----------
    library : str
        Holding library.
    country : str
        Country of the library.
    city : str
        City of the library.
    catalog_num : str
        Shelf mark or catalog number within the library.
    """

    library: str = ""
    country: str = ""
    city: str = ""
    catalog_num: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LocationEntry":
        """Build an entry from a decoded ms_locations object.

        Missing or null keys become empty strings; numeric catalog numbers
        are kept as their decimal text.
        """
        values = {name: data.get(name) for name in LOCATION_FIELDS}
        return cls(**{k: "" if v is None else str(v).strip() for k, v in values.items()})

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class LocationRecord:
    """Locations of one manuscript, as stored in a location shard.

    Attributes
    ----------
    unique_id : str
        Manuscript id as written in the shard.
    ms_locations : tuple[LocationEntry, ...]
        Known copies in source order.
    """

    unique_id: str
    ms_locations: tuple[LocationEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ManuscriptDetails:
    """Detail-view composite: a manuscript and its resolved locations.

    Attributes
    ----------
    manuscript : Manuscript
        Metadata record.
    locations : tuple[LocationEntry, ...]
        Known copies; empty when none are recorded.
    """

    manuscript: Manuscript
    locations: tuple[LocationEntry, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = self.manuscript.to_dict()
        data["ms_locations"] = [loc.to_dict() for loc in self.locations]
        return data
