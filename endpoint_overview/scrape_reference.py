"""Parse the reference tables of the Twitch developer documentation."""

from urllib.parse import urljoin

from bs4 import BeautifulSoup, NavigableString, Tag

from endpoint_overview.errors import InvalidRow, TableNotFound
from endpoint_overview.reference_row import EventSubRow, HelixRow


def _text(el: Tag) -> str:
    """Element text with whitespace runs collapsed."""
    return " ".join(el.get_text().split())


def find_table_rows(html: str, table_id: str) -> list[Tag]:
    """Return the body rows of the table that follows the element `#table_id`."""
    soup = BeautifulSoup(html, "html.parser")
    anchor = soup.find(id=table_id)
    parent = anchor.parent if isinstance(anchor, Tag) else None
    tbody = parent.find("tbody") if parent is not None else None
    if not isinstance(tbody, Tag):
        raise TableNotFound(table_id)
    return tbody.find_all("tr", recursive=False)


def _cells(row: Tag) -> list[Tag]:
    return row.find_all(["td", "th"], recursive=False)


def _first_element(cell: Tag) -> Tag | NavigableString | None:
    for child in cell.children:
        if isinstance(child, NavigableString) and not child.strip():
            continue
        return child  # type: ignore[return-value]
    return None


def parse_helix_table(html: str, table_id: str, base_url: str) -> list[HelixRow]:
    """Parse the Helix API reference into one row per endpoint."""
    rows: list[HelixRow] = []
    for i, tr in enumerate(find_table_rows(html, table_id)):
        cells = _cells(tr)
        if len(cells) < 2:
            raise InvalidRow(i, f"expected 2 cells, got {len(cells)}")
        category = _text(cells[0])
        endpoint = _first_element(cells[1])
        if not isinstance(endpoint, Tag) or endpoint.name != "a":
            raise InvalidRow(i, f"endpoint in category {category!r} is not a link")
        href = endpoint.get("href")
        if not isinstance(href, str):
            raise InvalidRow(i, f"endpoint in category {category!r} has no href")
        rows.append(
            HelixRow(
                category=category,
                name=_text(endpoint),
                link=urljoin(base_url, href),
            )
        )
    return rows


def parse_eventsub_table(html: str, table_id: str, base_url: str) -> list[EventSubRow]:
    """Parse the EventSub subscription types into one row per type."""
    rows: list[EventSubRow] = []
    for i, tr in enumerate(find_table_rows(html, table_id)):
        cells = _cells(tr)
        if len(cells) < 3:
            raise InvalidRow(i, f"expected 3 cells, got {len(cells)}")
        sub_type = cells[0].find("a")
        name = cells[1].find("code")
        version = cells[2].find("code")
        if not isinstance(sub_type, Tag) or not isinstance(sub_type.get("href"), str):
            raise InvalidRow(i, "missing subscription link")
        if not isinstance(name, Tag) or not _text(name):
            raise InvalidRow(i, "missing subscription name")
        if not isinstance(version, Tag) or not _text(version):
            raise InvalidRow(i, f"missing version of {_text(name)}")
        rows.append(
            EventSubRow(
                sub_type=_text(sub_type),
                link=urljoin(base_url, str(sub_type["href"])),
                name=_text(name),
                version=_text(version),
            )
        )
    return rows
