"""Walk the statement in document order and turn event tables into rows.

The distribution schedule a table belongs to is only given by the nearest
preceding <h2>, which is a sibling rather than an ancestor of the tables it
describes. Headings and data tables are therefore selected together, in
document order, classified once, and then folded over while remembering the
last schedule name seen.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Union

from bs4 import BeautifulSoup, Tag

from ..transform.columns import ColumnOrder
from .event_rows import build_event_row
from .html_tree import first_text
from .supplemental import link_release, link_withdrawal

NODE_SELECTOR = "h2, table.sw-datatable"
TITLE_SELECTOR = "th.newReportTitleStyle"
SCHEDULE_PREFIX = "Summary of "


class EventType(str, Enum):
    RELEASE = "Buy"
    WITHDRAWAL = "Sell"


@dataclass(frozen=True)
class HeadingNode:
    schedule: str


@dataclass(frozen=True)
class EventTableNode:
    table: Tag
    title: str
    event_type: EventType


@dataclass(frozen=True)
class IrrelevantTableNode:
    table: Tag


Node = Union[HeadingNode, EventTableNode, IrrelevantTableNode]


@dataclass
class MungeResult:
    columns: List[str]
    rows: List[Mapping[str, str]]


def schedule_name(heading_text: str) -> str:
    s = heading_text.strip()
    if s.startswith(SCHEDULE_PREFIX):
        s = s[len(SCHEDULE_PREFIX):]
    return s.strip()


def classify_table(table: Tag) -> Node:
    title = first_text(table, TITLE_SELECTOR)
    if "Release" in title:
        return EventTableNode(table, title.strip(), EventType.RELEASE)
    if "Withdrawal on" in title:
        return EventTableNode(table, title.strip(), EventType.WITHDRAWAL)
    return IrrelevantTableNode(table)


def classify_nodes(soup: BeautifulSoup) -> List[Node]:
    nodes: List[Node] = []
    for el in soup.select(NODE_SELECTOR):
        if el.name == "h2":
            nodes.append(HeadingNode(schedule_name(el.get_text())))
        else:
            nodes.append(classify_table(el))
    return nodes


def walk(nodes: List[Node]) -> MungeResult:
    columns = ColumnOrder()
    rows: List[Mapping[str, str]] = []
    schedule = ""
    for node in nodes:
        if isinstance(node, HeadingNode):
            schedule = node.schedule
        elif isinstance(node, EventTableNode):
            row = build_event_row(node.table, node.title, node.event_type.value, schedule, columns)
            if node.event_type is EventType.RELEASE:
                link_release(node.table, row, columns)
            else:
                link_withdrawal(node.table, row, columns)
            rows.append(MappingProxyType(row))
    return MungeResult(columns=columns.as_list(), rows=rows)
