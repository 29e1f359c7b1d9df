from __future__ import annotations

from typing import Optional

from lxml import etree


def parse_xml(text: str) -> etree._Element:
    # Encoded first: lxml rejects str input that carries an encoding declaration
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    return etree.fromstring(text.encode("utf-8"), parser)


def check_well_formed(text: str) -> Optional[str]:
    """None if ``text`` is a well-formed XML document, else the parser message."""
    try:
        parse_xml(text)
    except etree.XMLSyntaxError as e:
        return str(e)
    return None


__all__ = ["parse_xml", "check_well_formed"]
