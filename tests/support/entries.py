"""Builders for registration entries used across tests."""

from __future__ import annotations

from spireconf.domain.model import Entry, Identity, Selector
from spireconf.resources import EntryResourceModel

TRUST_DOMAIN = "example.org"
PARENT = Identity(TRUST_DOMAIN, "/spire/agent/join_token/2b1a8a3e")
SUBJECT = Identity(TRUST_DOMAIN, "/workload/api")


def make_entry(
    *selectors: str,
    subject: Identity = SUBJECT,
    parent: Identity | None = PARENT,
    entry_id: str = "",
) -> Entry:
    """Create an entry from ``type:value`` selector strings."""

    return Entry(
        id=entry_id,
        subject_identity=subject,
        parent_identity=parent,
        selectors=tuple(Selector.parse(raw) for raw in selectors),
    )


def make_record(*selectors: str, entry_id: str | None = None) -> EntryResourceModel:
    """Entry record as a host would submit it, using the registry field names."""

    return EntryResourceModel.model_validate(
        {
            "id": entry_id,
            "spiffe_id": {"trust_domain": SUBJECT.authority, "path": SUBJECT.path},
            "parent_id": {"trust_domain": PARENT.authority, "path": PARENT.path},
            "selectors": [
                {"type": selector.type, "value": selector.value}
                for selector in map(Selector.parse, selectors)
            ],
        }
    )
