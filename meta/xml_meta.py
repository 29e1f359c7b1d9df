from dataclasses import dataclass
from typing import Dict

Namespace = str


@dataclass(frozen=True)
class XmlSchemaMeta:
    xsi_ns: Namespace = "http://www.w3.org/2001/XMLSchema-instance"
    xs_ns: Namespace = "http://www.w3.org/2001/XMLSchema"

    @property
    def builtin_abbreviations(self) -> Dict[str, str]:
        return {"ns-xsi": self.xsi_ns, "ns-xs": self.xs_ns}
