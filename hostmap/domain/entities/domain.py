"""Domain (hostname binding) entity.

Pure representation of a hostname/path bound to a content node, with zero
external dependencies beyond attrs.
"""

from attrs import define, field, validators

WILDCARD_PREFIX = "*"


@define(frozen=True, slots=True)
class Domain:
    """A hostname or hostname/path bound to a site root in the content tree.

    Domains are identified by their database ID and by a unique name. Names are
    compared case-insensitively by the persistence layer. A domain whose name is
    blank or starts with ``*`` is a wildcard domain: it only assigns a culture
    to a branch of the content tree and does not take part in hostname routing.
    """

    domain_name: str = field(validator=validators.instance_of(str))
    root_content_id: int | None = field(default=None)
    language_id: int | None = field(default=None)
    language_iso_code: str | None = field(default=None)
    # The internal database ID, assigned on first save
    id: int | None = field(default=None)

    @property
    def is_wildcard(self) -> bool:
        """True when this domain matches by pattern rather than exact hostname."""
        return not self.domain_name.strip() or self.domain_name.startswith(
            WILDCARD_PREFIX
        )

    def with_id(self, db_id: int) -> "Domain":
        """Set the internal database ID for this domain."""
        if not isinstance(db_id, int) or db_id <= 0:
            raise ValueError(
                f"Invalid database ID: {db_id}. Must be a positive integer.",
            )

        return self.__class__(
            domain_name=self.domain_name,
            root_content_id=self.root_content_id,
            language_id=self.language_id,
            language_iso_code=self.language_iso_code,
            id=db_id,
        )

    def with_root_content(self, content_id: int | None) -> "Domain":
        """Create a copy of this domain bound to another content node."""
        return self.__class__(
            domain_name=self.domain_name,
            root_content_id=content_id,
            language_id=self.language_id,
            language_iso_code=self.language_iso_code,
            id=self.id,
        )
