"""
Generic XML (de)serialization driven by each model's ``fields`` table.
"""

from typing import Any, Dict, List, Union

from lxml import etree

from .fields import to_python, to_text

QBO_NAMESPACE = "http://schema.intuit.com/finance/v3"

XmlSource = Union[bytes, str, etree._Element]


def qualify(tag: str) -> str:
    return f"{{{QBO_NAMESPACE}}}{tag}"


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def parse_xml(source: XmlSource) -> etree._Element:
    """
    Parse bytes or text into an element.

    Raises ``etree.XMLSyntaxError`` for malformed input.
    """
    if isinstance(source, etree._Element):
        return source
    if isinstance(source, str):
        source = source.encode("utf-8")
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    return etree.fromstring(source, parser)


def find_first(element: etree._Element, name: str) -> etree._Element | None:
    """First descendant-or-self element with the given local name."""
    if local_name(element) == name:
        return element
    for found in element.iter(qualify(name), name):
        return found
    return None


class ToXmlMixin:
    XML_NODE: str
    fields: tuple

    def to_xml(self, tag: str | None = None, sparse: bool = False) -> etree._Element:
        element = etree.Element(
            qualify(tag or self.XML_NODE or type(self).__name__),
            nsmap={None: QBO_NAMESPACE},
        )
        if sparse:
            element.set("sparse", "true")
        self._fill_element(element)
        return element

    def to_xml_string(self, pretty: bool = False, sparse: bool = False) -> str:
        return etree.tostring(
            self.to_xml(sparse=sparse), pretty_print=pretty, encoding="unicode"
        )

    def _fill_element(self, element: etree._Element) -> None:
        for field in self.fields:
            value = getattr(self, field.name, None)
            if value is None:
                continue
            if field.is_attribute:
                element.set(field.attribute_name, to_text(value))
                continue
            if field.is_text:
                element.text = to_text(value)
                continue

            for item in value if field.many else [value]:
                child = etree.SubElement(element, qualify(field.xml_name))
                if field.is_nested:
                    item._fill_element(child)
                else:
                    child.text = to_text(item)


class FromXmlMixin:
    XML_NODE: str
    fields: tuple

    @classmethod
    def from_xml(cls, source: XmlSource) -> Any:
        """
        Build a model from XML.

        ``source`` may be the model's own element or any document that
        contains it, such as an ``IntuitResponse`` wrapper.
        """
        element = parse_xml(source)
        if cls.XML_NODE:
            found = find_first(element, cls.XML_NODE)
            if found is None:
                raise ValueError(
                    f"no <{cls.XML_NODE}> element in <{local_name(element)}>"
                )
            element = found
        return cls.from_element(element)

    @classmethod
    def from_element(cls, element: etree._Element) -> Any:
        obj = cls()
        children: Dict[str, List[etree._Element]] = {}
        for child in element:
            if isinstance(child.tag, str):
                children.setdefault(local_name(child), []).append(child)

        for field in cls.fields:
            if field.is_attribute:
                value = to_python(field.type, element.get(field.attribute_name))
            elif field.is_text:
                value = to_python(field.type, element.text)
            else:
                matches = children.get(field.xml_name, [])
                if field.is_nested:
                    values = [field.type.from_element(child) for child in matches]
                else:
                    values = [to_python(field.type, child.text) for child in matches]
                if field.many:
                    value = values
                else:
                    value = values[0] if values else None
            setattr(obj, field.name, value)
        return obj


class ToDictMixin:
    fields: tuple

    def to_dict(self) -> Dict[str, Any]:
        def convert(value: Any) -> Any:
            if isinstance(value, ToDictMixin):
                return value.to_dict()
            if isinstance(value, list):
                return [convert(v) for v in value]
            return value

        return {field.name: convert(getattr(self, field.name, None)) for field in self.fields}
