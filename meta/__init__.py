from .xml_meta import XmlSchemaMeta
from .default_model import DEFAULT_META, MetaBundle

__all__ = [
    "XmlSchemaMeta",
    "MetaBundle",
    "DEFAULT_META",
]
