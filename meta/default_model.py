from dataclasses import dataclass, field
from .xml_meta import XmlSchemaMeta


@dataclass(frozen=True)
class MetaBundle:
    xml: XmlSchemaMeta = field(default_factory=XmlSchemaMeta)


DEFAULT_META = MetaBundle()
