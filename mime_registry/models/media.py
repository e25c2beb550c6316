"""Media type data models."""

from dataclasses import dataclass, field

from mime_registry.utils.mime import format_media_type


@dataclass
class MediaType:
    """Parsed media type: base type plus parameters.

    Attribute names in ``params`` are lower-cased by the parser.
    """

    base: str
    params: dict[str, str] = field(default_factory=dict)

    @property
    def charset(self) -> str:
        """The charset parameter, or empty string."""
        return self.params.get("charset", "")

    def format(self) -> str:
        """Serialize back to a ``type/subtype; key=value`` string."""
        return format_media_type(self.base, self.params)
