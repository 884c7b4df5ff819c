from __future__ import annotations

from datetime import datetime, timedelta, timezone

import lxml.etree as etree
import pytest

from ews_search.config.models import ServiceConfig, XmlWriterConfig
from ews_search.core.enums import ExchangeVersion, SortDirection, XmlNamespace
from ews_search.exceptions import ServiceXmlSerializationError
from ews_search.xml.writer import ServiceXmlWriter

M = "{http://schemas.microsoft.com/exchange/services/2006/messages}"
T = "{http://schemas.microsoft.com/exchange/services/2006/types}"


def test_writer_converts_attribute_values() -> None:
    writer = ServiceXmlWriter()
    with writer.element(XmlNamespace.TYPES, "Values"):
        writer.write_attribute_value("Flag", False)
        writer.write_attribute_value("Order", SortDirection.DESCENDING)
        writer.write_attribute_value("Count", 3)
        writer.write_attribute_value(
            "When",
            datetime(2024, 5, 1, 9, 0, tzinfo=timezone(timedelta(hours=9))),
        )
        writer.write_attribute_value("Missing", None)
        writer.write_attribute_value("Empty", "")

    root = etree.fromstring(writer.to_bytes())

    assert root.tag == T + "Values"
    assert dict(root.attrib) == {
        "Flag": "false",
        "Order": "Descending",
        "Count": "3",
        "When": "2024-05-01T00:00:00Z",
    }


def test_writer_nests_elements_and_text() -> None:
    writer = ServiceXmlWriter()
    with writer.element(XmlNamespace.MESSAGES, "Outer"):
        writer.write_element_value(XmlNamespace.TYPES, "Inner", "a < b")

    root = etree.fromstring(writer.to_bytes())

    assert root.tag == M + "Outer"
    assert root.findtext(T + "Inner") == "a < b"
    assert root.nsmap["m"] == "http://schemas.microsoft.com/exchange/services/2006/messages"
    assert "a &lt; b" in writer.to_string()


def test_attribute_after_child_is_rejected() -> None:
    writer = ServiceXmlWriter()
    writer.write_start_element(XmlNamespace.MESSAGES, "Outer")
    writer.write_element_value(XmlNamespace.TYPES, "Inner", "x")

    with pytest.raises(ServiceXmlSerializationError, match="Late"):
        writer.write_attribute_value("Late", "1")


def test_attribute_without_open_element_is_rejected() -> None:
    with pytest.raises(ServiceXmlSerializationError):
        ServiceXmlWriter().write_attribute_value("Orphan", "1")


def test_end_element_without_start_is_rejected() -> None:
    with pytest.raises(ServiceXmlSerializationError):
        ServiceXmlWriter().write_end_element()


def test_unclosed_element_cannot_be_serialized() -> None:
    writer = ServiceXmlWriter()
    writer.write_start_element(XmlNamespace.MESSAGES, "Open")

    with pytest.raises(ServiceXmlSerializationError, match="Open"):
        writer.to_bytes()


def test_scoped_element_closes_nested_elements_on_error() -> None:
    writer = ServiceXmlWriter()

    with pytest.raises(RuntimeError):
        with writer.element(XmlNamespace.MESSAGES, "Outer"):
            writer.write_start_element(XmlNamespace.TYPES, "Inner")
            raise RuntimeError("boom")

    assert writer.depth == 0
    assert etree.fromstring(writer.to_bytes()).tag == M + "Outer"


def test_invalid_names_and_values_raise_serialization_error() -> None:
    writer = ServiceXmlWriter()

    with pytest.raises(ServiceXmlSerializationError):
        writer.write_start_element(XmlNamespace.MESSAGES, "bad name")

    with writer.element(XmlNamespace.MESSAGES, "Outer"):
        with pytest.raises(ServiceXmlSerializationError):
            writer.write_attribute_value("bad name", "1")
        with pytest.raises(ServiceXmlSerializationError):
            writer.write_attribute_value("Unsupported", object())
        with pytest.raises(ServiceXmlSerializationError):
            writer.write_value("\x00")


def test_writer_from_service_config_applies_output_settings() -> None:
    service = ServiceConfig(
        requested_server_version=ExchangeVersion.EXCHANGE_2010,
        writer=XmlWriterConfig(xml_declaration=True),
    )
    writer = ServiceXmlWriter.for_service(service)
    writer.write_element_value(XmlNamespace.MESSAGES, "First", "1")
    writer.write_element_value(XmlNamespace.MESSAGES, "Second", "2")

    payload = writer.to_bytes()

    assert writer.requested_server_version == ExchangeVersion.EXCHANGE_2010
    assert payload.startswith(b"<?xml")
    assert payload.count(b"<?xml") == 1
