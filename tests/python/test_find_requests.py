from __future__ import annotations

import logging

import lxml.etree as etree
import pytest

from ews_search.config.models import ServiceConfig
from ews_search.core.enums import BasePropertySet, ExchangeVersion, SortDirection
from ews_search.exceptions import ServiceValidationError, ServiceVersionError
from ews_search.properties.property_set import PropertySet
from ews_search.properties.schema import FolderSchema, ItemSchema
from ews_search.requests.find import FindFolderRequest, FindItemRequest
from ews_search.search.folder_view import FolderView
from ews_search.search.grouping import Grouping
from ews_search.search.item_view import ItemView
from ews_search.xml.writer import ServiceXmlWriter

M = "{http://schemas.microsoft.com/exchange/services/2006/messages}"
T = "{http://schemas.microsoft.com/exchange/services/2006/types}"
SOAP = "{http://schemas.xmlsoap.org/soap/envelope/}"


class RecordingItemView(ItemView):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.write_calls = 0

    def write_to_xml(self, writer: ServiceXmlWriter, group_by: Grouping | None = None) -> None:
        self.write_calls += 1
        super().write_to_xml(writer, group_by)


def _body_request(payload: bytes) -> etree._Element:
    envelope = etree.fromstring(payload)
    assert envelope.tag == SOAP + "Envelope"
    return envelope.find(SOAP + "Body")[0]


def test_find_item_request_serializes_elements_in_schema_order() -> None:
    view = ItemView(page_size=50, property_set=PropertySet(BasePropertySet.ID_ONLY, [ItemSchema.SUBJECT]))
    view.order_by.add(ItemSchema.DATE_TIME_RECEIVED, SortDirection.DESCENDING)
    group_by = Grouping(group_on=ItemSchema.CATEGORIES, aggregate_on=ItemSchema.DATE_TIME_RECEIVED)
    request = FindItemRequest(view, ["inbox", "drafts"], group_by=group_by, query_string="subject:report")

    find_item = _body_request(request.to_xml())

    assert find_item.tag == M + "FindItem"
    assert find_item.get("Traversal") == "Shallow"
    assert [child.tag for child in find_item] == [
        M + "ItemShape",
        M + "IndexedPageItemView",
        M + "GroupBy",
        M + "SortOrder",
        M + "ParentFolderIds",
        M + "QueryString",
    ]
    assert find_item.find(M + "IndexedPageItemView").get("MaxEntriesReturned") == "50"
    folder_ids = find_item.findall(f"{M}ParentFolderIds/{T}DistinguishedFolderId")
    assert [folder.get("Id") for folder in folder_ids] == ["inbox", "drafts"]
    assert find_item.findtext(M + "QueryString") == "subject:report"


def test_request_envelope_carries_requested_server_version() -> None:
    request = FindFolderRequest(
        FolderView(page_size=10),
        ["msgfolderroot"],
        service=ServiceConfig(requested_server_version=ExchangeVersion.EXCHANGE_2010_SP1),
    )

    envelope = etree.fromstring(request.to_xml())

    version = envelope.find(f"{SOAP}Header/{T}RequestServerVersion")
    assert version.get("Version") == "Exchange2010_SP1"
    find_folder = envelope.find(SOAP + "Body")[0]
    assert find_folder.tag == M + "FindFolder"
    assert [child.tag for child in find_folder] == [
        M + "FolderShape",
        M + "IndexedPageFolderView",
        M + "ParentFolderIds",
    ]


def test_incompatible_property_stops_request_before_serialization() -> None:
    view = RecordingItemView(page_size=10, property_set=PropertySet(additional_properties=[ItemSchema.BODY]))
    request = FindItemRequest(view, ["inbox"])

    with pytest.raises(ServiceValidationError, match="Body.*FindItem"):
        request.to_xml()

    assert view.write_calls == 0


def test_request_serializes_same_bytes_twice() -> None:
    view = ItemView(page_size=5, property_set=PropertySet(additional_properties=[ItemSchema.SUBJECT]))
    request = FindItemRequest(view, ["inbox"])

    assert request.to_xml() == request.to_xml()


def test_find_item_rejects_folder_view() -> None:
    request = FindItemRequest(FolderView(page_size=1), ["inbox"])

    with pytest.raises(ServiceValidationError, match="FolderView"):
        request.validate()


def test_find_folder_rejects_item_view() -> None:
    request = FindFolderRequest(ItemView(page_size=1), ["inbox"])

    with pytest.raises(ServiceValidationError, match="ItemView"):
        request.validate()


def test_find_request_requires_parent_folder() -> None:
    request = FindFolderRequest(FolderView(page_size=1), [])

    with pytest.raises(ServiceValidationError, match="FindFolder"):
        request.validate()


def test_find_item_validates_grouping() -> None:
    request = FindItemRequest(ItemView(page_size=1), ["inbox"], group_by=Grouping(group_on=ItemSchema.SUBJECT))

    with pytest.raises(ServiceValidationError, match="aggregate_on"):
        request.validate()


def test_query_string_requires_exchange_2010() -> None:
    request = FindItemRequest(
        ItemView(page_size=1),
        ["inbox"],
        query_string="from:alice",
        service=ServiceConfig(requested_server_version=ExchangeVersion.EXCHANGE_2007_SP1),
    )

    with pytest.raises(ServiceVersionError, match="QueryString"):
        request.validate()


def test_find_folder_validates_view_property_set_against_folder_request() -> None:
    view = FolderView(page_size=1, property_set=PropertySet(additional_properties=[FolderSchema.WELL_KNOWN_FOLDER_NAME]))
    request = FindFolderRequest(
        view,
        ["msgfolderroot"],
        service=ServiceConfig(requested_server_version=ExchangeVersion.EXCHANGE_2010_SP2),
    )

    with pytest.raises(ServiceVersionError, match="WellKnownFolderName"):
        request.validate()


def test_to_xml_logs_validation_and_serialization(caplog: pytest.LogCaptureFixture) -> None:
    request = FindItemRequest(ItemView(page_size=1), ["inbox"])

    with caplog.at_level(logging.DEBUG, logger="ews_search"):
        payload = request.to_xml()

    messages = [record.getMessage() for record in caplog.records]
    assert "request validated element=FindItem version=Exchange2013" in messages
    assert f"request serialized element=FindItem bytes={len(payload)}" in messages
