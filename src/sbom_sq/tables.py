from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from rich import box
from rich.markup import escape
from rich.table import Table

from .models import Document, File, Package
from .styles import Role, Style, keyword_role

T = TypeVar("T")

CREATED_FORMAT = "%d %b %y %H:%M %Z"


class Tier(str, Enum):
    BASIC = "basic"
    IP = "ip"
    EXT = "ext"


Column = Tuple[str, Callable[[T], str]]


def _checksum(file: File) -> str:
    return file.checksums[0].value if file.checksums else ""


def _algorithm(file: File) -> str:
    return file.checksums[0].algorithm if file.checksums else ""


PACKAGE_COLUMNS: dict[Tier, List[Column[Package]]] = {
    Tier.BASIC: [
        ("Supplier", lambda pkg: pkg.supplier),
        ("Name", lambda pkg: pkg.name),
        ("VersionInfo", lambda pkg: pkg.version),
        ("Homepage", lambda pkg: pkg.homepage),
    ],
    Tier.IP: [
        ("Name", lambda pkg: pkg.name),
        ("VersionInfo", lambda pkg: pkg.version),
        ("LicenseDeclared", lambda pkg: pkg.license_declared),
        ("LicenseConcluded", lambda pkg: pkg.license_concluded),
        ("CopyrightText", lambda pkg: pkg.copyright_text),
        ("FilesAnalyzed", lambda pkg: str(pkg.files_analyzed).lower()),
    ],
    Tier.EXT: [
        ("Supplier", lambda pkg: pkg.supplier),
        ("Name", lambda pkg: pkg.name),
        ("VersionInfo", lambda pkg: pkg.version),
        ("Homepage", lambda pkg: pkg.homepage),
        ("LicenseDeclared", lambda pkg: pkg.license_declared),
        ("LicenseConcluded", lambda pkg: pkg.license_concluded),
        ("FilesAnalyzed", lambda pkg: str(pkg.files_analyzed).lower()),
        ("DownloadLocation", lambda pkg: pkg.download_location),
        ("CopyrightText", lambda pkg: pkg.copyright_text),
    ],
}

FILE_COLUMNS: dict[Tier, List[Column[File]]] = {
    Tier.BASIC: [
        ("FileName", lambda f: f.file_name),
        ("checksum", _checksum),
        ("Algorithm", _algorithm),
    ],
    Tier.IP: [
        ("FileName", lambda f: f.file_name),
        ("LicenseConcluded", lambda f: f.license_concluded),
        ("LicenseInfoInFiles", lambda f: ", ".join(f.license_info_in_files)),
        ("CopyrightText", lambda f: f.copyright_text),
    ],
    Tier.EXT: [
        ("FileName", lambda f: f.file_name),
        ("LicenseConcluded", lambda f: f.license_concluded),
        ("LicenseInfoInFiles", lambda f: ", ".join(f.license_info_in_files)),
        ("SPDXId", lambda f: f.spdx_id),
        ("CopyrightText", lambda f: f.copyright_text),
        ("checksum", _checksum),
        ("Algorithm", _algorithm),
    ],
}


def _limited(items: Sequence[T], limit: Optional[int]) -> Sequence[T]:
    if limit is None:
        return items
    return items[: max(0, limit)]


def _new_table(headers: Sequence[str], caption: Optional[str]) -> Table:
    table = Table(box=box.SQUARE, caption=caption)
    table.add_column("#", justify="right")
    for header in headers:
        table.add_column(header, justify="center")
    return table


def _caption(count: int, noun: str, style: Style) -> Optional[str]:
    if count == 0:
        return None
    return style.apply(f"There are {count} {noun}", Role.INDEX)


def _listing(
    items: Sequence[T],
    columns: List[Column[T]],
    limit: Optional[int],
    caption: Optional[str],
) -> Table:
    table = _new_table([header for header, _ in columns], caption)
    for n, item in enumerate(_limited(items, limit), start=1):
        table.add_row(str(n), *(escape(getter(item)) for _, getter in columns))
    return table


def packages_table(
    document: Document,
    limit: Optional[int] = None,
    tier: Tier = Tier.BASIC,
    style: Style = Style.plain(),
) -> Table:
    packages = document.packages
    return _listing(packages, PACKAGE_COLUMNS[tier], limit, _caption(len(packages), "pkgs", style))


def files_table(
    document: Document,
    limit: Optional[int] = None,
    tier: Tier = Tier.BASIC,
    style: Style = Style.plain(),
) -> Table:
    files = document.files
    return _listing(files, FILE_COLUMNS[tier], limit, _caption(len(files), "Files", style))


def relationships_table(
    document: Document,
    limit: Optional[int] = None,
    style: Style = Style.plain(),
) -> Table:
    rels = document.relationships
    table = _new_table(
        ["SpdxElementID", "RelationshipType", "RelatedSpdxElement"],
        _caption(len(rels), "relationships", style),
    )
    for n, rel in enumerate(_limited(rels, limit), start=1):
        table.add_row(
            str(n),
            escape(rel.source_id),
            style.apply(rel.relationship_type, keyword_role(rel.kind)),
            escape(rel.target_id),
        )
    return table


def meta_rows(document: Document) -> List[Tuple[int, str, str]]:
    """Numbered key/value pairs describing the document itself.

    The creators row is skipped when there are none, but its number is
    still consumed so row numbers stay stable across documents.
    """
    info = document.creation_info
    entries: List[Tuple[str, Optional[str]]] = [
        ("Spdx ID", document.spdx_id),
        ("Spdx version", document.spdx_version),
        ("Spdx creation date", info.created.strftime(CREATED_FORMAT).strip() if info.created else ""),
        ("created by", ", ".join(info.creators) if info.creators else None),
        ("Project Name", document.name),
        ("File License(not projects)", document.data_license),
        ("Document Namespace", document.namespace),
        ("Document Describes", ", ".join(document.describes)),
        ("Number of Packages", str(len(document.packages))),
        ("Number of Files", str(len(document.files))),
        ("Number of Relationships", str(len(document.relationships))),
    ]
    return [(n, key, value) for n, (key, value) in enumerate(entries, start=1) if value is not None]


def meta_table(document: Document, style: Style = Style.plain()) -> Table:
    table = Table(box=box.SQUARE)
    for header in ("#", "Key", "Value"):
        table.add_column(header, justify="center")
    emphasized = {"Spdx creation date": Role.NAME, "Project Name": Role.COUNT}
    for n, key, value in meta_rows(document):
        if key.startswith("Number of"):
            rendered = style.apply(value, Role.COUNT)
        elif key in emphasized:
            rendered = style.apply(value, emphasized[key])
        else:
            rendered = escape(value)
        table.add_row(str(n), style.apply(key, Role.VERSION), rendered)
    return table
