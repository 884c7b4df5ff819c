from __future__ import annotations

from datetime import UTC, datetime

import lxml.etree as etree
import pytest

from ews_search.core.enums import (
    AggregateType,
    FolderTraversal,
    ItemTraversal,
    OffsetBasePoint,
    SortDirection,
    XmlNamespace,
)
from ews_search.exceptions import (
    ConfigurationError,
    ServiceLocalError,
    ServiceValidationError,
    ServiceXmlSerializationError,
)
from ews_search.properties.schema import FolderSchema, ItemSchema
from ews_search.requests.find import FindItemRequest
from ews_search.search.calendar_view import CalendarView
from ews_search.search.folder_view import FolderView
from ews_search.search.grouping import Grouping
from ews_search.search.item_view import ItemView
from ews_search.search.order_by import OrderByCollection
from ews_search.xml.writer import ServiceXmlWriter

M = "{http://schemas.microsoft.com/exchange/services/2006/messages}"
T = "{http://schemas.microsoft.com/exchange/services/2006/types}"


def _parse_fragment(data: bytes) -> list[etree._Element]:
    return list(etree.fromstring(b"<fragment>" + data + b"</fragment>"))


def _write_view(view, group_by: Grouping | None = None) -> list[etree._Element]:
    writer = ServiceXmlWriter()
    view.write_to_xml(writer, group_by)
    return _parse_fragment(writer.to_bytes())


def test_item_view_writes_paging_attributes() -> None:
    view = ItemView(page_size=50, offset=100, offset_base_point=OffsetBasePoint.END)
    children = _write_view(view)

    assert children[0].tag == M + "ItemShape"
    assert children[1].tag == M + "IndexedPageItemView"
    assert dict(children[1].attrib) == {
        "MaxEntriesReturned": "50",
        "Offset": "100",
        "BasePoint": "End",
    }


def test_item_view_writes_grouping_after_view_element() -> None:
    group_by = Grouping(
        group_on=ItemSchema.SUBJECT,
        aggregate_on=ItemSchema.DATE_TIME_RECEIVED,
        sort_direction=SortDirection.DESCENDING,
        aggregate_type=AggregateType.MAXIMUM,
    )
    children = _write_view(ItemView(page_size=10), group_by)

    assert [child.tag for child in children] == [M + "ItemShape", M + "IndexedPageItemView", M + "GroupBy"]
    group = children[2]
    assert group.get("Order") == "Descending"
    assert group.find(T + "FieldURI").get("FieldURI") == "item:Subject"
    aggregate = group.find(T + "AggregateOn")
    assert aggregate.get("Aggregate") == "Maximum"
    assert aggregate.find(T + "FieldURI").get("FieldURI") == "item:DateTimeReceived"


def test_item_view_writes_traversal_and_order_by_separately() -> None:
    view = ItemView(page_size=10, traversal=ItemTraversal.ASSOCIATED)
    view.order_by.add(ItemSchema.DATE_TIME_RECEIVED, SortDirection.DESCENDING)
    view.order_by.add(ItemSchema.SUBJECT)

    writer = ServiceXmlWriter()
    with writer.element(XmlNamespace.MESSAGES, "FindItem"):
        view.write_attributes_to_xml(writer)
        view.write_order_by_to_xml(writer)
    root = etree.fromstring(writer.to_bytes())

    assert root.get("Traversal") == "Associated"
    orders = root.findall(f"{M}SortOrder/{T}FieldOrder")
    assert [order.get("Order") for order in orders] == ["Descending", "Ascending"]
    assert [order.find(T + "FieldURI").get("FieldURI") for order in orders] == [
        "item:DateTimeReceived",
        "item:Subject",
    ]


def test_item_view_rejects_invalid_page_settings() -> None:
    with pytest.raises(ConfigurationError):
        ItemView(page_size=0)

    view = ItemView(page_size=5)
    with pytest.raises(ConfigurationError):
        view.page_size = -1
    with pytest.raises(ConfigurationError):
        view.offset = -1

    assert view.page_size == 5
    assert view.offset == 0


def test_item_view_page_size_setter_updates_max_entries() -> None:
    view = ItemView(page_size=5)
    view.page_size = 75

    assert view.get_max_entries_returned() == 75
    assert _write_view(view)[1].get("MaxEntriesReturned") == "75"


def test_folder_view_writes_folder_shape_and_no_sort_order() -> None:
    view = FolderView(page_size=20, traversal=FolderTraversal.DEEP)
    children = _write_view(view)

    assert children[0].tag == M + "FolderShape"
    assert children[1].tag == M + "IndexedPageFolderView"
    assert children[1].get("MaxEntriesReturned") == "20"

    writer = ServiceXmlWriter()
    with writer.element(XmlNamespace.MESSAGES, "FindFolder"):
        view.write_attributes_to_xml(writer)
        view.write_order_by_to_xml(writer)
    root = etree.fromstring(writer.to_bytes())

    assert root.get("Traversal") == "Deep"
    assert len(root) == 0


def test_calendar_view_writes_dates_and_optional_max_items() -> None:
    start = datetime(2024, 1, 1, tzinfo=UTC)
    end = datetime(2024, 1, 31, 12, 30, tzinfo=UTC)

    unbounded = _write_view(CalendarView(start, end))
    assert unbounded[1].tag == M + "CalendarView"
    assert dict(unbounded[1].attrib) == {
        "StartDate": "2024-01-01T00:00:00Z",
        "EndDate": "2024-01-31T12:30:00Z",
    }
    assert len(unbounded) == 2

    bounded = _write_view(CalendarView(start, end, max_items_returned=7))
    assert bounded[1].get("MaxEntriesReturned") == "7"


def test_calendar_view_rejects_end_before_start() -> None:
    view = CalendarView(datetime(2024, 2, 1, tzinfo=UTC), datetime(2024, 1, 1, tzinfo=UTC))

    with pytest.raises(ServiceValidationError, match="end_date"):
        view.validate(FindItemRequest(view, ["calendar"]))


def test_calendar_view_compares_naive_dates_as_utc() -> None:
    view = CalendarView(datetime(2024, 1, 1), datetime(2024, 1, 2, tzinfo=UTC))
    view.validate(FindItemRequest(view, ["calendar"]))

    reversed_view = CalendarView(datetime(2024, 1, 2, tzinfo=UTC), datetime(2024, 1, 1, 23, 59))
    with pytest.raises(ServiceValidationError, match="end_date"):
        reversed_view.validate(FindItemRequest(reversed_view, ["calendar"]))


def test_calendar_view_rejects_non_positive_max_items() -> None:
    with pytest.raises(ConfigurationError):
        CalendarView(datetime(2024, 1, 1, tzinfo=UTC), datetime(2024, 1, 2, tzinfo=UTC), max_items_returned=0)


def test_grouping_requires_both_properties() -> None:
    with pytest.raises(ServiceValidationError, match="aggregate_on"):
        Grouping(group_on=ItemSchema.SUBJECT).internal_validate()
    with pytest.raises(ServiceValidationError, match="group_on"):
        Grouping(aggregate_on=ItemSchema.SUBJECT).internal_validate()


def test_incomplete_grouping_fails_with_serialization_error() -> None:
    writer = ServiceXmlWriter()

    with pytest.raises(ServiceXmlSerializationError, match="Grouping"):
        ItemView(page_size=10).write_to_xml(writer, Grouping(group_on=ItemSchema.SUBJECT))

    assert writer.depth == 0


def test_order_by_collection_rejects_duplicate_property() -> None:
    order_by = OrderByCollection()
    order_by.add(FolderSchema.DISPLAY_NAME)

    with pytest.raises(ServiceLocalError, match="DisplayName"):
        order_by.add(FolderSchema.DISPLAY_NAME, SortDirection.DESCENDING)

    assert order_by.remove(FolderSchema.DISPLAY_NAME) is True
    assert len(order_by) == 0


def test_empty_order_by_collection_writes_nothing() -> None:
    writer = ServiceXmlWriter()
    OrderByCollection().write_to_xml(writer, "SortOrder")

    assert writer.to_bytes() == b""
