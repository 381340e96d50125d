"""
termindex Vocabulary
Term records and the embedded acronym/jargon vocabulary
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional
import logging

import yaml

logger = logging.getLogger(__name__)

ACRONYM = "acronym"
JARGON = "jargon"
VALID_KINDS = (ACRONYM, JARGON)

# Field aliases accepted in vocabulary entries (matched case-insensitively)
_FIELD_ALIASES = {
    "text": "text",
    "brief": "brief",
    "definition": "definition",
    "kind": "kind",
    "type": "kind",
}

# Embedded vocabulary of acronyms and jargon
DEFAULT_VOCABULARY_YAML = """
mdi:
  text: "MDI"
  brief: "Mission Data Integration"
  definition: "Group of back-end and data facilitation applications that move mission data between systems."
  kind: acronym

ato:
  text: "ATO"
  brief: "Air Tasking Order  -or- Authority To Operate"
  definition: "Air Tasking Order: the recurring cycle of strategy, planning, execution and assessment. Authority To Operate: official approval to run a system within pre-approved protocol."
  kind: acronym

atc:
  text: "ATC"
  brief: "Air Tasking Cycle"
  definition: "The recurring air operations cycle, also known as the Air Tasking Order."
  kind: acronym

"609":
  text: "609"
  brief: "the Air Operations Center (AOC) located in the Joint Air Base in Al Udeid, Qatar"
  kind: jargon

unclass:
  text: "UNCLASS"
  brief: "unclassified information"
  kind: jargon

fouo:
  text: "FOUO"
  brief: "For Official Use Only"
  definition: "A document designation, not a classification, for unclassified information that may be exempt from public release."
  kind: acronym

secaf:
  text: "SecAF"
  brief: "Secretary of the Air Force"

sipr:
  text: "SIPR"
  brief: "short for SIPRNet -- Secret Internet Protocol Router Network"
  kind: acronym

nipr:
  text: "NIPR"
  brief: "short for NIPRNet -- Non-classified Internet Protocol Router Network"
  kind: acronym

govcloud:
  text: "GovCloud"
  brief: "AWS (Amazon Web Services) for Government"
  kind: jargon

sc2s:
  text: "Sc2s"
  brief: "Strategic Command and Control Software (part of AWS)"
  kind: acronym

c2s:
  text: "C2s"
  brief: "Commercial Cloud Services (part of AWS)"
  kind: acronym

tdy:
  text: "TDY"
  brief: "Temporary Duty"
  definition: "When a military member is sent on temporary duty to a different location."
  kind: acronym

kres:
  text: "KRES"
  brief: "Kessel Run Enterprise Services"
  kind: acronym

adcp:
  text: "ADCP"
  brief: "Kessel Run All Domain Common Platform"
  kind: acronym

"10.1":
  text: "10.1"
  brief: ""
  definition: "Legacy systems and processes that came into use in the 1990s and early 2000s."
  kind: jargon

block 20:
  text: "Block 20"
  brief: "Block 20 or B20"
  definition: "New software being developed and fielded by the software factory."
  kind: jargon

b20:
  text: "B20"
  brief: "B20 or Block 20"
  kind: acronym

distributed ops:
  text: "Distributed Ops"
  brief: "Distributed Operations"

disa:
  text: "DISA"
  brief: "Defense Information Systems Agency"
  kind: acronym

ipm:
  text: "IPM"
  brief: ""
  kind: acronym

acquisitions:
  text: "acquisitions"
  brief: ""
  definition: "The procurement process for software and other tools."
  kind: jargon

hackathon:
  text: "Hackathon"
  brief: "A sprint event formed around a defined theme to encourage innovation and teamwork."
  kind: jargon

devsecops:
  text: "devsecops"
  brief: "Software created with security built in to the development process and operational uses."

wrt:
  text: "WRT"
  brief: "with regard to"
  kind: acronym

imho:
  text: "IMHO"
  brief: "in my humble opinion (similar to in my opinion)"
  kind: acronym

imo:
  text: "IMO"
  brief: "in my opinion (similar to in my humble opinion)"
  kind: acronym

afaik:
  text: "AFAIK"
  brief: "as far as I know"
  kind: acronym
"""


class MalformedVocabularyEntry(ValueError):
    """A vocabulary entry that cannot be turned into a term record"""


@dataclass(frozen=True)
class TermRecord:
    """One vocabulary entry, carrying its own key"""
    key: str
    text: str
    brief: str = ""
    definition: str = ""
    kind: Optional[str] = None  # None means unclassified

    @property
    def is_probeable(self) -> bool:
        """Whether the record can be reached through the fingerprint"""
        return bool(self.text and self.text.strip())

    @classmethod
    def from_entry(cls, key: str, entry: Mapping[str, Any]) -> 'TermRecord':
        """
        Build a record from a vocabulary entry

        Args:
            key: Key of the entry in the vocabulary mapping
            entry: Mapping of record fields. Accepts text/brief/definition/kind
                in any case, and type as an alias of kind.

        Returns:
            TermRecord with ``key`` copied into it
        """
        if not isinstance(entry, Mapping):
            raise MalformedVocabularyEntry(
                f"Entry {key!r} must be a mapping of fields, got {type(entry).__name__}"
            )

        fields: Dict[str, Any] = {}
        for name, value in entry.items():
            field_name = _FIELD_ALIASES.get(str(name).lower())
            if field_name is None:
                logger.debug(f"Ignoring unknown field {name!r} on entry {key!r}")
                continue
            fields[field_name] = value

        kind = fields.get("kind") or None
        if kind is not None:
            kind = str(kind).lower()
            if kind not in VALID_KINDS:
                raise MalformedVocabularyEntry(
                    f"Entry {key!r} has unknown kind {kind!r}; expected one of {VALID_KINDS}"
                )

        return cls(
            key=key,
            text=str(fields.get("text") or ""),
            brief=str(fields.get("brief") or ""),
            definition=str(fields.get("definition") or ""),
            kind=kind,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_default_vocabulary() -> Dict[str, Dict[str, Any]]:
    """Parse the embedded vocabulary into a key -> fields mapping"""
    vocabulary = yaml.safe_load(DEFAULT_VOCABULARY_YAML)
    # YAML keys like 609 come back as numbers without quoting
    return {str(key): fields for key, fields in vocabulary.items()}
